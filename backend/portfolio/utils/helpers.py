"""Form and upload helpers shared by the routers: slugs, image payloads and JSON-encoded form fields."""

import json
import re
from dataclasses import dataclass
from typing import Any, List, Optional

from starlette.datastructures import UploadFile

from portfolio.config import settings
from portfolio.utils.errors import ValidationError

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    slug = _NON_ALNUM_RE.sub("-", (title or "").lower())
    return slug.strip("-")


@dataclass(frozen=True)
class ImagePayload:
    filename: str
    content_type: str
    data: bytes


async def read_image(file: UploadFile, field: str) -> Optional[ImagePayload]:
    if not isinstance(file, UploadFile) or not file.filename:
        return None
    content = await file.read()
    if not content:
        return None
    ext = file.filename.rsplit(".", 1)[-1].lower() if "." in file.filename else ""
    if ext not in settings.ALLOWED_IMAGE_EXTENSIONS:
        raise ValidationError.for_field(
            field, f"File type '{ext}' not allowed. Allowed: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}"
        )
    if len(content) > settings.MAX_IMAGE_SIZE:
        raise ValidationError.for_field(field, f"File exceeds {settings.MAX_IMAGE_SIZE // (1024 * 1024)} MB limit")
    return ImagePayload(
        filename=file.filename,
        content_type=file.content_type or f"image/{ext}",
        data=content,
    )


def parse_json_list(raw: Any, field: str) -> List[str]:
    if isinstance(raw, list):
        return raw
    try:
        value = json.loads(raw)
    except (TypeError, json.JSONDecodeError):
        raise ValidationError.for_field(field, "must be a JSON array")
    if not isinstance(value, list):
        raise ValidationError.for_field(field, "must be a JSON array")
    return value


def parse_rich_text(raw: str) -> str:
    # The admin form may send the editor HTML JSON-encoded.
    text = raw.strip()
    if text.startswith('"'):
        try:
            value = json.loads(text)
        except json.JSONDecodeError:
            return raw
        if isinstance(value, str):
            return value
    return raw
