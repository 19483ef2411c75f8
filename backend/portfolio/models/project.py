"""Portfolio project model. Image slots hold references to objects in external image storage."""

from sqlalchemy import JSON, Boolean, Column, Date, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from portfolio.database import Base


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(200), unique=True, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)  # rich text HTML
    short_description = Column(String(200), nullable=False)
    features = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    category = Column(String(100), nullable=False)
    framework = Column(String(100), nullable=False)
    duration = Column(String(100), nullable=False)
    created_date = Column(Date, nullable=False)
    responsive = Column(Boolean, nullable=False, default=True)
    browser_compatible = Column(Boolean, nullable=False, default=True)
    documentation = Column(Boolean, nullable=False, default=True)
    live_url = Column(String(500))
    frontend_code_url = Column(String(500))
    backend_code_url = Column(String(500))
    # {filename, contentType, url, storageId}
    main_image = Column(JSON, nullable=False)
    full_page_image = Column(JSON, nullable=True)
    additional_images = Column(JSON, nullable=False, default=list)
    featured = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
