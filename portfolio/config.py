from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    # General
    project_name: str = Field("Portfolio API", alias="PROJECT_NAME")
    project_id: Optional[str] = Field(default=None, alias="PROJECT_ID", description="Firebase/GCP project ID")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    cors_origins: str = Field("http://localhost:3000", alias="CORS_ORIGINS")

    # Firebase
    firebase_credentials_json: Optional[str] = Field(
        default=None,
        alias="GOOGLE_APPLICATION_CREDENTIALS",
        description="Path to service-account JSON file or JSON string itself.",
    )
    firebase_web_api_key: Optional[str] = Field(
        default=None,
        alias="FIREBASE_WEB_API_KEY",
        description="Web API key used for email/password sign-in through the Identity Toolkit REST API.",
    )
    firebase_auth_timeout: float = Field(10.0, alias="FIREBASE_AUTH_TIMEOUT")
    require_admin_claim: bool = Field(
        True,
        alias="REQUIRE_ADMIN_CLAIM",
        description="If true, admin routes also require the `admin` custom claim on the ID token.",
    )

    # Image processing (inline data URLs)
    small_image_max_bytes: int = Field(2 * 1024 * 1024, alias="SMALL_IMAGE_MAX_BYTES")
    large_image_max_bytes: int = Field(5 * 1024 * 1024, alias="LARGE_IMAGE_MAX_BYTES")
    project_image_max_dim: int = Field(800, alias="PROJECT_IMAGE_MAX_DIM")
    project_image_quality: float = Field(0.6, ge=0.0, le=1.0, alias="PROJECT_IMAGE_QUALITY")
    profile_image_max_dim: int = Field(600, alias="PROFILE_IMAGE_MAX_DIM")
    profile_image_quality: float = Field(0.7, ge=0.0, le=1.0, alias="PROFILE_IMAGE_QUALITY")
    certificate_image_max_dim: int = Field(800, alias="CERTIFICATE_IMAGE_MAX_DIM")
    certificate_image_quality: float = Field(0.8, ge=0.0, le=1.0, alias="CERTIFICATE_IMAGE_QUALITY")
    skill_icon_max_dim: int = Field(800, alias="SKILL_ICON_MAX_DIM")
    skill_icon_quality: float = Field(0.8, ge=0.0, le=1.0, alias="SKILL_ICON_QUALITY")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True)

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
