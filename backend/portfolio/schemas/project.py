"""Pydantic schemas for project create/update requests and responses."""

import re
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from portfolio.schemas.base import CamelModel

_HTTP_URL_RE = re.compile(r"^https?://.+")
URL_FIELDS = ("live_url", "frontend_code_url", "backend_code_url")


def _check_optional_url(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    if not _HTTP_URL_RE.match(value.strip()):
        raise ValueError("Must be a valid http(s) URL")
    return value.strip()


class ImageSlot(CamelModel):
    filename: str
    content_type: str
    url: str
    storage_id: str


class ProjectCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    features: List[str] = []
    short_description: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1)
    framework: str = Field(min_length=1)
    duration: str = Field(min_length=1)
    created_date: date
    responsive: bool = True
    browser_compatible: bool = True
    documentation: bool = True
    tags: List[str] = []
    live_url: Optional[str] = None
    frontend_code_url: Optional[str] = None
    backend_code_url: Optional[str] = None
    featured: bool = False
    order: int = Field(default=0, ge=0)

    @field_validator(*URL_FIELDS)
    @classmethod
    def _check_url(cls, value):
        return _check_optional_url(value)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value


class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    features: Optional[List[str]] = None
    short_description: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, min_length=1)
    framework: Optional[str] = Field(default=None, min_length=1)
    duration: Optional[str] = Field(default=None, min_length=1)
    created_date: Optional[date] = None
    responsive: Optional[bool] = None
    browser_compatible: Optional[bool] = None
    documentation: Optional[bool] = None
    tags: Optional[List[str]] = None
    live_url: Optional[str] = None
    frontend_code_url: Optional[str] = None
    backend_code_url: Optional[str] = None
    featured: Optional[bool] = None
    order: Optional[int] = Field(default=None, ge=0)

    @field_validator(*URL_FIELDS)
    @classmethod
    def _check_url(cls, value):
        return _check_optional_url(value)


class ProjectOut(CamelModel):
    project_id: int
    slug: str
    title: str
    description: str
    features: List[str] = []
    short_description: str
    category: str
    framework: str
    duration: str
    created_date: date
    responsive: bool
    browser_compatible: bool
    documentation: bool
    tags: List[str] = []
    live_url: Optional[str] = None
    frontend_code_url: Optional[str] = None
    backend_code_url: Optional[str] = None
    main_image: ImageSlot
    full_page_image: Optional[ImageSlot] = None
    additional_images: List[ImageSlot] = []
    featured: bool
    order: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
