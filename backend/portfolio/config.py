"""Centralized application settings loaded from environment variables."""

from pathlib import Path
from typing import List

from pydantic import ValidationError
from pydantic_settings import BaseSettings

from portfolio.utils.errors import ConfigError

INSECURE_DEFAULT_SECRET = "your-secret-key-change-this-in-production"


class Settings(BaseSettings):
    # Document store; no default, a missing value stops the process.
    DATABASE_URL: str
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Session token
    JWT_SECRET: str = INSECURE_DEFAULT_SECRET
    JWT_ALGORITHM: str = "HS256"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60
    SESSION_COOKIE_NAME: str = "admin-token"

    # Route gate
    ADMIN_PREFIX: str = "/admin"
    ADMIN_LOGIN_PATH: str = "/admin/login"

    # Image storage (Cloudinary)
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_FOLDER: str = "portfolio"
    MAX_IMAGE_SIZE: int = 10 * 1024 * 1024  # 10 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp"]
    STORAGE_TIMEOUT_SECONDS: float = 15.0

    # Response cache / revalidation
    CACHE_TTL_SECONDS: int = 3600
    REVALIDATE_WEBHOOK_URL: str = ""
    REVALIDATE_WEBHOOK_SECRET: str = ""

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "production"

    @property
    def uses_default_secret(self) -> bool:
        return not self.JWT_SECRET or self.JWT_SECRET == INSECURE_DEFAULT_SECRET

    @property
    def image_storage_configured(self) -> bool:
        return all(
            str(value or "").strip()
            for value in (self.CLOUDINARY_CLOUD_NAME, self.CLOUDINARY_API_KEY, self.CLOUDINARY_API_SECRET)
        )

    class Config:
        # Load backend/.env regardless of the working directory.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


try:
    settings = Settings()
except ValidationError as exc:
    raise ConfigError(f"Invalid or missing configuration: {exc}") from exc
