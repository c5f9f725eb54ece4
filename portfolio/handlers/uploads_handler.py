"""Image uploads for the admin forms.

Files are turned into inline data URLs and handed back to the form; nothing
is stored until the form itself is submitted.
"""
from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, File, Query, UploadFile

from portfolio.errors import ValidationError
from portfolio.handlers.dependencies import require_admin
from portfolio.models import ImageAsset, ImageConfig, ImageKind, RejectedFile, UploadResult
from portfolio.services.images import check_image, encode_image, encode_many, image_config_for

router = APIRouter(prefix="/api/admin/uploads", tags=["uploads"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.post("/image", response_model=ImageAsset)
async def upload_image(
    file: UploadFile = File(...),
    kind: ImageKind = Query(ImageKind.PROFILE),
):
    config = image_config_for(kind)
    _check_before_read(file, config)
    data = await file.read()
    return await asyncio.to_thread(encode_image, data, file.content_type, config)


@router.post("/images", response_model=UploadResult)
async def upload_images(
    files: list[UploadFile] = File(...),
    kind: ImageKind = Query(ImageKind.PROJECT),
):
    config = image_config_for(kind)
    batch = []
    rejected: list[RejectedFile] = []
    for f in files:
        try:
            _check_before_read(f, config)
        except ValidationError as exc:
            logger.warning("Rejected upload %s: %s", f.filename, exc.message)
            rejected.append(RejectedFile(filename=f.filename, reason=exc.message))
            continue
        batch.append((f.filename, f.content_type, await f.read()))

    result = await encode_many(batch, config)
    result.rejected = rejected + result.rejected
    logger.info("Encoded %d image(s), rejected %d", len(result.images), len(result.rejected))
    return result


def _check_before_read(file: UploadFile, config: ImageConfig) -> None:
    """Apply the guard to the spooled upload so oversized files are never read into memory."""

    if file.size is not None:
        check_image(file.content_type, file.size, max_bytes=config.max_bytes, accepted_prefix=config.accepted_prefix)
