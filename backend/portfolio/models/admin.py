"""Administrator account model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from portfolio.database import Base


class Admin(Base):
    __tablename__ = "admins"

    admin_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
