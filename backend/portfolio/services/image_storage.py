"""Image storage client for the hosted image service (Cloudinary SDK)."""

import logging
import uuid
from dataclasses import dataclass

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from portfolio.config import settings
from portfolio.utils.errors import StorageError
from portfolio.utils.helpers import ImagePayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredImage:
    url: str
    storage_id: str


class CloudinaryStorage:
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        *,
        folder: str = "portfolio",
        timeout: float = 15.0,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "CloudinaryStorage":
        cloudinary.config(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            secure=True,
        )
        return cls(
            settings.CLOUDINARY_CLOUD_NAME,
            settings.CLOUDINARY_API_KEY,
            settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
            timeout=float(settings.STORAGE_TIMEOUT_SECONDS),
        )

    def _ensure_configured(self) -> None:
        if not (self.cloud_name and self.api_key and self.api_secret):
            raise StorageError("Image storage is not configured")

    def _options(self) -> dict:
        return {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "timeout": self.timeout,
        }

    def upload(self, image: ImagePayload, folder: str = "projects") -> StoredImage:
        self._ensure_configured()
        stem = image.filename.rsplit(".", 1)[0] or "image"
        try:
            result = cloudinary.uploader.upload(
                image.data,
                folder=f"{self.folder}/{folder}",
                # unique per upload
                public_id=f"{stem}-{uuid.uuid4().hex[:8]}",
                resource_type="image",
                **self._options(),
            )
        except CloudinaryError as exc:
            raise StorageError(f"Image upload failed for {image.filename}: {exc}") from exc
        url = result.get("secure_url") or result.get("url")
        public_id = result.get("public_id")
        if not url or not public_id:
            raise StorageError("Image storage upload returned no URL")
        logger.info("[storage] uploaded %s as %s", image.filename, public_id)
        return StoredImage(url=url, storage_id=public_id)

    def delete(self, storage_id: str) -> None:
        self._ensure_configured()
        try:
            result = cloudinary.uploader.destroy(storage_id, **self._options())
        except CloudinaryError as exc:
            raise StorageError(f"Image delete failed for {storage_id}: {exc}") from exc
        outcome = result.get("result")
        if outcome not in ("ok", "not found"):
            raise StorageError(f"Image storage refused to delete {storage_id}: {outcome}")
        logger.info("[storage] deleted %s (%s)", storage_id, outcome)


def get_image_storage() -> CloudinaryStorage:
    return CloudinaryStorage.from_settings()


def image_slot(image: ImagePayload, stored: StoredImage) -> dict:
    return {
        "filename": image.filename,
        "contentType": image.content_type,
        "url": stored.url,
        "storageId": stored.storage_id,
    }
