"""Pydantic schemas for the singleton content documents (hero, about, expertise, navigation)."""

import re
from typing import List

from pydantic import Field, field_validator, model_validator

from portfolio.schemas.base import CamelModel
from portfolio.utils.icons import IconType, normalize_icon

_LINK_RE = re.compile(r"^(https?://|mailto:)\S+$")


# Hero

class RotatingText(CamelModel):
    id: str
    text: str = Field(min_length=1)


class TechIcon(CamelModel):
    id: str
    src: str = Field(min_length=1)
    title: str = Field(min_length=1)


class HeroUpdate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    rotating_texts: List[RotatingText] = Field(min_length=1)
    description: str = Field(min_length=1, max_length=1000)
    profile_image: str = Field(min_length=1)
    cv_download_url: str = Field(min_length=1)
    tech_icons: List[TechIcon] = []


# About

class SkillItem(CamelModel):
    id: str
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)


class SkillCategory(CamelModel):
    id: str
    name: str = Field(min_length=1)
    items: List[SkillItem] = []


class AboutMyself(CamelModel):
    title: str = Field(min_length=1)
    description: List[str] = Field(min_length=1)


class AboutSkills(CamelModel):
    title: str = Field(min_length=1)
    categories: List[SkillCategory] = []


class AboutUpdate(CamelModel):
    myself: AboutMyself
    skills: AboutSkills


# Expertise

class ExpertiseSkill(CamelModel):
    id: str
    name: str = Field(min_length=1)
    percentage: float = Field(ge=0, le=100)
    category: str


class ExpertiseCategory(CamelModel):
    id: str
    name: str = Field(min_length=1)
    skills: List[ExpertiseSkill] = []


class ExpertiseUpdate(CamelModel):
    title: str = Field(min_length=1)
    subtitle: str = Field(min_length=1)
    categories: List[ExpertiseCategory] = []


# Navigation

class NavigationLink(CamelModel):
    id: str
    label: str = Field(min_length=1)
    href: str = Field(min_length=1)
    order: int = Field(ge=0)
    is_active: bool = True


class SocialLink(CamelModel):
    id: str
    href: str
    icon: str = Field(min_length=1)
    icon_type: IconType = IconType.LUCIDE
    label: str = Field(min_length=1)
    order: int = Field(ge=0)
    is_active: bool = True

    @field_validator("href")
    @classmethod
    def _check_href(cls, value: str) -> str:
        if not _LINK_RE.match(value.strip()):
            raise ValueError("Must be a valid URL")
        return value.strip()

    @model_validator(mode="after")
    def _normalize_icon(self):
        self.icon = normalize_icon(self.icon, self.icon_type)
        return self


class NavigationUpdate(CamelModel):
    navigation_links: List[NavigationLink] = []
    social_links: List[SocialLink] = []
