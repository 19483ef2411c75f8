"""SQLAlchemy model package initialization."""

from portfolio.models.admin import Admin
from portfolio.models.site_document import SiteDocument
from portfolio.models.project import Project

__all__ = [
    "Admin",
    "SiteDocument",
    "Project",
]
