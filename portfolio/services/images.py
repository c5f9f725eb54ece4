"""Inline image pipeline for portfolio content.

Uploaded images are never sent to a blob store. They are guarded, downscaled,
re-encoded as JPEG and kept as ``data:`` URLs directly on the owning Firestore
document (``projects.images``, ``certifications.imageUrl``,
``settings/profile.heroImage`` ...). The pipeline is:

    check_image -> normalize_image -> to_data_url

``encode_image`` runs the whole chain and falls back to the original bytes
when Pillow cannot process the file, so a bad image never blocks a form.
"""
from __future__ import annotations

import asyncio
import base64
import io
import json
import logging
from typing import Any, Iterable, Mapping, Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from portfolio.config import get_settings
from portfolio.errors import ImageProcessingError, ValidationError
from portfolio.models import ImageAsset, ImageConfig, ImageKind, RejectedFile, ScalePriority, UploadResult

logger = logging.getLogger(__name__)
settings = get_settings()

JPEG_MIME = "image/jpeg"
# Firestore rejects documents above 1 MiB; inline images count against it.
MAX_DOCUMENT_BYTES = 1024 * 1024


def image_config_for(kind: ImageKind) -> ImageConfig:
    """Return the pipeline parameters used by each kind of upload."""

    if kind is ImageKind.PROJECT:
        return ImageConfig(
            max_dimension=settings.project_image_max_dim,
            quality=settings.project_image_quality,
            priority=ScalePriority.WIDTH,
            max_bytes=settings.large_image_max_bytes,
        )
    if kind is ImageKind.PROFILE:
        return ImageConfig(
            max_dimension=settings.profile_image_max_dim,
            quality=settings.profile_image_quality,
            priority=ScalePriority.WIDTH,
            max_bytes=settings.large_image_max_bytes,
        )
    if kind is ImageKind.CERTIFICATE:
        return ImageConfig(
            max_dimension=settings.certificate_image_max_dim,
            quality=settings.certificate_image_quality,
            priority=ScalePriority.LONGEST_SIDE,
            max_bytes=settings.small_image_max_bytes,
        )
    return ImageConfig(
        max_dimension=settings.skill_icon_max_dim,
        quality=settings.skill_icon_quality,
        priority=ScalePriority.LONGEST_SIDE,
        max_bytes=settings.small_image_max_bytes,
    )


# ------------------------------------------------------------------
# Guard
# ------------------------------------------------------------------

def check_image(
    content_type: str | None,
    byte_size: int,
    *,
    max_bytes: int,
    accepted_prefix: str = "image/",
) -> None:
    """Reject a candidate file before any decoding happens.

    Raises
    ------
    ValidationError
        If the MIME type is not an image type, the file is empty, or it is
        larger than ``max_bytes``.
    """

    if not content_type or not content_type.lower().startswith(accepted_prefix):
        raise ValidationError("Please select an image file")
    if byte_size <= 0:
        raise ValidationError("Image file is empty")
    if byte_size > max_bytes:
        raise ValidationError(f"Image must be less than {_format_megabytes(max_bytes)}")


def _format_megabytes(num_bytes: int) -> str:
    megabytes = num_bytes / (1024 * 1024)
    return f"{megabytes:g}MB"


# ------------------------------------------------------------------
# Normalizer
# ------------------------------------------------------------------

def compute_target_size(
    width: int,
    height: int,
    max_dimension: int,
    priority: ScalePriority = ScalePriority.WIDTH,
) -> Tuple[int, int]:
    """Return the output size for an image of ``width`` x ``height``.

    Images are only ever scaled down, and the aspect ratio is kept.
    """

    scale = 1.0
    if priority is ScalePriority.WIDTH:
        if width > max_dimension:
            scale = max_dimension / width
    elif width > height and width > max_dimension:
        scale = max_dimension / width
    elif height > max_dimension:
        scale = max_dimension / height

    if scale == 1.0:
        return width, height
    return max(1, round(width * scale)), max(1, round(height * scale))


def _jpeg_quality(quality: float) -> int:
    return max(1, min(100, round(quality * 100)))


def normalize_image(
    data: bytes,
    *,
    max_dimension: int,
    quality: float,
    priority: ScalePriority = ScalePriority.WIDTH,
) -> str:
    """Decode, downscale and re-encode image bytes as a JPEG data URL."""

    try:
        with Image.open(io.BytesIO(data)) as source:
            img = ImageOps.exif_transpose(source)
            target = compute_target_size(img.width, img.height, max_dimension, priority)
            img = img.convert("RGB")  # ensure RGB for JPEG
            if target != img.size:
                img = img.resize(target, Image.Resampling.LANCZOS)
            buffer = io.BytesIO()
            img.save(buffer, format="JPEG", quality=_jpeg_quality(quality), optimize=True)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageProcessingError(f"Failed to process image: {exc}") from exc

    return to_data_url(buffer.getvalue(), JPEG_MIME)


# ------------------------------------------------------------------
# Inline storage
# ------------------------------------------------------------------

def to_data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def encode_image(data: bytes, content_type: str | None, config: ImageConfig) -> ImageAsset:
    """Run the full pipeline for one file and return the asset to store.

    Guard failures propagate as ``ValidationError``. Processing failures do
    not: the original bytes are stored instead, undownscaled.
    """

    check_image(content_type, len(data), max_bytes=config.max_bytes, accepted_prefix=config.accepted_prefix)
    try:
        encoded = normalize_image(
            data,
            max_dimension=config.max_dimension,
            quality=config.quality,
            priority=config.priority,
        )
    except ImageProcessingError as exc:
        logger.warning("Image compression failed, storing original bytes: %s", exc.message)
        return ImageAsset(
            source_bytes=data,
            mime_type=content_type,
            byte_size=len(data),
            encoded=to_data_url(data, content_type),
            fallback=True,
        )

    logger.debug("Encoded %s image (%d bytes -> %d chars)", content_type, len(data), len(encoded))
    return ImageAsset(source_bytes=data, mime_type=content_type, byte_size=len(data), encoded=encoded)


async def encode_many(
    files: Iterable[Tuple[str | None, str | None, bytes]],
    config: ImageConfig,
) -> UploadResult:
    """Encode a batch of ``(filename, content_type, data)`` files concurrently.

    Rejected files are reported instead of failing the batch. Accepted images
    come back in the order they were given, not the order they finished.
    """

    files = list(files)
    outcomes = await asyncio.gather(
        *(asyncio.to_thread(_encode_or_reject, name, content_type, data, config) for name, content_type, data in files)
    )

    result = UploadResult()
    for outcome in outcomes:
        if isinstance(outcome, RejectedFile):
            result.rejected.append(outcome)
        else:
            result.images.append(outcome.encoded)
    return result


def _encode_or_reject(
    filename: str | None,
    content_type: str | None,
    data: bytes,
    config: ImageConfig,
) -> ImageAsset | RejectedFile:
    try:
        return encode_image(data, content_type, config)
    except ValidationError as exc:
        logger.warning("Rejected upload %s: %s", filename, exc.message)
        return RejectedFile(filename=filename, reason=exc.message)


def ensure_document_fits(fields: Mapping[str, Any]) -> None:
    """Reject a write whose inline images push it over the document limit."""

    size = len(json.dumps(fields, default=str).encode("utf-8"))
    if size > MAX_DOCUMENT_BYTES:
        raise ValidationError(
            f"Document is too large ({size // 1024} KB); remove or replace some images "
            f"(limit {MAX_DOCUMENT_BYTES // 1024} KB)"
        )
