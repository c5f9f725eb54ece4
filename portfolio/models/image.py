from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .base import DocumentModel


class ImageKind(str, Enum):
    PROJECT = "project"
    PROFILE = "profile"
    CERTIFICATE = "certificate"
    SKILL = "skill"


class ScalePriority(str, Enum):
    WIDTH = "width"  # only the width is bounded (galleries, profile photos)
    LONGEST_SIDE = "longest_side"  # the longer side is bounded (certificates, icons)


class ImageConfig(BaseModel):
    max_dimension: int = Field(800, ge=1)
    quality: float = Field(0.7, ge=0.0, le=1.0)
    priority: ScalePriority = ScalePriority.WIDTH
    max_bytes: int = 5 * 1024 * 1024
    accepted_prefix: str = "image/"


class ImageAsset(DocumentModel):
    source_bytes: bytes = Field(b"", exclude=True, repr=False)
    mime_type: str  # of the source file
    byte_size: int  # of the source file
    encoded: str  # data URL stored inline on the owning document
    fallback: bool = False  # True when ``encoded`` holds the unprocessed original


class RejectedFile(DocumentModel):
    filename: str | None = None
    reason: str


class UploadResult(DocumentModel):
    images: list[str] = []
    rejected: list[RejectedFile] = []
