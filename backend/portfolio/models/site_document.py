"""Singleton content documents (hero, about, expertise, navigation) keyed by a well-known key."""

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.sql import func

from portfolio.database import Base


class SiteDocument(Base):
    __tablename__ = "site_documents"

    content_key = Column(String(50), primary_key=True)
    content_type = Column(String(30), nullable=False)  # hero/about/expertise/navigation
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
