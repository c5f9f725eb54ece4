# tests/unit/images/test_image_normalizer.py

import base64
import io
from unittest.mock import patch

import pytest
from PIL import Image

from portfolio.errors import ImageProcessingError, ValidationError
from portfolio.models import ImageConfig, ImageKind, ScalePriority
from portfolio.services.images import (
    MAX_DOCUMENT_BYTES,
    compute_target_size,
    encode_image,
    encode_many,
    ensure_document_fits,
    image_config_for,
    normalize_image,
    to_data_url,
)


def decode_data_url(data_url: str):
    header, _, payload = data_url.partition(",")
    return header, Image.open(io.BytesIO(base64.b64decode(payload)))


# --- Test ID: UTC-03 ---
class TestComputeTargetSize:

    def test_width_priority_scales_wide_image(self):
        """UTC-03-TC-01: Success: 1600x1200 becomes 800x600."""
        assert compute_target_size(1600, 1200, 800, ScalePriority.WIDTH) == (800, 600)

    def test_width_priority_never_upscales(self):
        """UTC-03-TC-02: Edge: Images already within the bound keep their size."""
        assert compute_target_size(400, 300, 800, ScalePriority.WIDTH) == (400, 300)
        assert compute_target_size(800, 600, 800, ScalePriority.WIDTH) == (800, 600)

    def test_width_priority_ignores_tall_height(self):
        """UTC-03-TC-03: Edge: Width mode leaves a narrow, tall image alone."""
        assert compute_target_size(500, 3000, 800, ScalePriority.WIDTH) == (500, 3000)

    def test_longest_side_scales_portrait_by_height(self):
        """UTC-03-TC-04: Success: 1000x2000 with a 800 bound becomes 400x800."""
        assert compute_target_size(1000, 2000, 800, ScalePriority.LONGEST_SIDE) == (400, 800)

    def test_longest_side_scales_landscape_by_width(self):
        """UTC-03-TC-05: Success: 2000x1000 with a 800 bound becomes 800x400."""
        assert compute_target_size(2000, 1000, 800, ScalePriority.LONGEST_SIDE) == (800, 400)

    def test_longest_side_square(self):
        """UTC-03-TC-06: Edge: Squares are bounded on both sides."""
        assert compute_target_size(1200, 1200, 800, ScalePriority.LONGEST_SIDE) == (800, 800)

    def test_sides_never_collapse_to_zero(self):
        """UTC-03-TC-07: Edge: Extreme ratios keep at least one pixel."""
        assert compute_target_size(10000, 2, 800, ScalePriority.WIDTH) == (800, 1)


# --- Test ID: UTC-04 ---
class TestNormalizeImage:

    def test_output_is_jpeg_data_url_within_bounds(self, make_image):
        """UTC-04-TC-01: Success: A large PNG comes back as a downscaled JPEG."""
        data_url = normalize_image(make_image(1600, 1200), max_dimension=800, quality=0.6)

        header, img = decode_data_url(data_url)
        assert header == "data:image/jpeg;base64"
        assert img.format == "JPEG"
        assert img.size == (800, 600)

    def test_small_image_keeps_dimensions(self, make_image):
        """UTC-04-TC-02: Edge: Small images are re-encoded but not resized."""
        _, img = decode_data_url(normalize_image(make_image(120, 80), max_dimension=800, quality=0.7))
        assert img.size == (120, 80)

    def test_transparent_png_is_flattened(self, make_image):
        """UTC-04-TC-03: Edge: RGBA input is converted so it can be saved as JPEG."""
        data_url = normalize_image(make_image(50, 50, mode="RGBA"), max_dimension=800, quality=0.8)
        _, img = decode_data_url(data_url)
        assert img.mode == "RGB"

    def test_longest_side_priority(self, make_image):
        """UTC-04-TC-04: Success: Portrait certificates are bounded by height."""
        data_url = normalize_image(
            make_image(1000, 2000),
            max_dimension=800,
            quality=0.8,
            priority=ScalePriority.LONGEST_SIDE,
        )
        _, img = decode_data_url(data_url)
        assert img.size == (400, 800)

    def test_undecodable_bytes_raise(self):
        """UTC-04-TC-05: Failure: Garbage bytes raise ImageProcessingError."""
        with pytest.raises(ImageProcessingError) as exc_info:
            normalize_image(b"definitely not an image", max_dimension=800, quality=0.7)
        assert exc_info.value.status_code == 422


# --- Test ID: UTC-05 ---
class TestEncodeImage:

    def test_encodes_valid_upload(self, make_image):
        """UTC-05-TC-01: Success: A valid upload produces a processed asset."""
        data = make_image(1600, 1200, fmt="PNG")
        asset = encode_image(data, "image/png", image_config_for(ImageKind.PROJECT))

        assert asset.fallback is False
        assert asset.mime_type == "image/png"
        assert asset.byte_size == len(data)
        assert asset.encoded.startswith("data:image/jpeg;base64,")

    def test_falls_back_to_original_bytes(self):
        """UTC-05-TC-02: Edge: When processing fails the original bytes are stored."""
        data = b"\x89PNG but truncated"
        asset = encode_image(data, "image/png", image_config_for(ImageKind.PROFILE))

        assert asset.fallback is True
        assert asset.encoded == to_data_url(data, "image/png")
        assert asset.encoded.startswith("data:image/png;base64,")

    def test_guard_failures_are_not_swallowed(self, make_image):
        """UTC-05-TC-03: Failure: Oversized files are rejected, not stored raw."""
        config = ImageConfig(max_dimension=800, quality=0.8, max_bytes=10)
        with pytest.raises(ValidationError):
            encode_image(make_image(), "image/png", config)

    @pytest.mark.parametrize(
        "content_type, data",
        [
            ("image/png", b"\0" * 11),
            ("application/pdf", b"%PDF-1.4"),
            ("image/png", b""),
        ],
    )
    @patch("portfolio.services.images.normalize_image")
    def test_rejected_files_never_reach_normalizer(self, mock_normalize, content_type, data):
        """UTC-05-TC-05: Failure: Oversized, empty and non-image files stop at the guard."""
        config = ImageConfig(max_dimension=800, quality=0.8, max_bytes=10)

        with pytest.raises(ValidationError):
            encode_image(data, content_type, config)

        mock_normalize.assert_not_called()

    def test_source_bytes_not_serialized(self, make_image):
        """UTC-05-TC-04: Edge: The raw source never ends up in API output."""
        asset = encode_image(make_image(), "image/png", image_config_for(ImageKind.SKILL))
        assert "source_bytes" not in asset.model_dump()


# --- Test ID: UTC-06 ---
@pytest.mark.asyncio
class TestEncodeMany:

    async def test_preserves_selection_order(self, make_image):
        """UTC-06-TC-01: Success: Images come back in the order they were given."""
        files = [
            ("big.png", "image/png", make_image(3000, 2000)),
            ("small.png", "image/png", make_image(10, 20)),
            ("mid.png", "image/png", make_image(900, 100)),
        ]

        result = await encode_many(files, image_config_for(ImageKind.PROJECT))

        sizes = [decode_data_url(url)[1].size for url in result.images]
        assert sizes == [(800, 533), (10, 20), (800, 89)]
        assert result.rejected == []

    async def test_rejected_files_are_reported(self, make_image):
        """UTC-06-TC-02: Partial: Non-images are reported, the rest still encode."""
        files = [
            ("notes.txt", "text/plain", b"hello"),
            ("photo.png", "image/png", make_image(50, 50)),
        ]

        result = await encode_many(files, image_config_for(ImageKind.PROJECT))

        assert len(result.images) == 1
        assert [(r.filename, r.reason) for r in result.rejected] == [("notes.txt", "Please select an image file")]


# --- Test ID: UTC-07 ---
class TestEnsureDocumentFits:

    def test_small_document_passes(self):
        """UTC-07-TC-01: Success: Ordinary documents are accepted."""
        ensure_document_fits({"title": "x", "images": ["data:image/jpeg;base64,AAAA"]})

    def test_oversized_document_rejected(self):
        """UTC-07-TC-02: Failure: Inline images over the 1 MiB limit are refused."""
        with pytest.raises(ValidationError, match="too large"):
            ensure_document_fits({"images": ["A" * MAX_DOCUMENT_BYTES]})
