"""Closed set of social link icons understood by the site, with a fallback for unknown names."""

from enum import Enum


class IconType(str, Enum):
    LUCIDE = "lucide"
    IMAGE = "image"


class SocialIcon(str, Enum):
    FACEBOOK = "Facebook"
    LINKEDIN = "Linkedin"
    GITHUB = "Github"
    TWITTER = "Twitter"
    INSTAGRAM = "Instagram"
    YOUTUBE = "Youtube"
    MAIL = "Mail"
    GLOBE = "Globe"
    LINK = "Link"


FALLBACK_ICON = SocialIcon.LINK

_ICONS_BY_NAME = {icon.value.lower(): icon for icon in SocialIcon}
# Names seen in older navigation documents.
_ICONS_BY_NAME.update({
    "x": SocialIcon.TWITTER,
    "email": SocialIcon.MAIL,
    "website": SocialIcon.GLOBE,
})


def resolve_icon(name: str | None) -> SocialIcon:
    key = (name or "").strip().lower()
    return _ICONS_BY_NAME.get(key, FALLBACK_ICON)


def normalize_icon(name: str, icon_type: IconType) -> str:
    if icon_type == IconType.IMAGE:
        # image icons carry a URL, not a name
        return name.strip()
    return resolve_icon(name).value
