# backend/thumbnail_api/services/thumbnail_pipeline/utils/thumbnail_utils.py
"""
Thumbnail Utility Functions
"""

import io
from typing import Any, Dict, FrozenSet, Tuple

from PIL import Image

from ....constants import FIT_BACKGROUND_RGB
from ....enums import DetectedFormat

# Raster modes each Pillow encoder writes without conversion
ENCODER_MODES: Dict[DetectedFormat, FrozenSet[str]] = {
    DetectedFormat.JPEG: frozenset({"L", "RGB", "CMYK"}),
    DetectedFormat.PNG: frozenset({"1", "L", "LA", "P", "RGB", "RGBA", "I"}),
    DetectedFormat.GIF: frozenset({"L", "P", "RGB"}),
    DetectedFormat.BMP: frozenset({"1", "L", "P", "RGB"}),
    DetectedFormat.WEBP: frozenset({"RGB", "RGBA"}),
    DetectedFormat.TIFF: frozenset({"1", "L", "LA", "P", "RGB", "RGBA", "CMYK", "I", "F"}),
}

# Modes Image.resize handles with LANCZOS filtering
RESAMPLABLE_MODES = frozenset({"L", "LA", "RGB", "RGBA", "CMYK", "I", "F"})


def has_alpha(img: Image.Image) -> bool:
    """True when the raster carries transparency information."""
    return img.mode in ("RGBA", "LA") or "transparency" in img.info


def calculate_thumbnail_dimensions(
    source_size: Tuple[int, int], target_size: Tuple[int, int]
) -> Tuple[int, int]:
    """
    Calculate thumbnail dimensions preserving aspect ratio.

    Args:
        source_size: (width, height) of source image
        target_size: (width, height) of target size

    Returns:
        (width, height) of calculated thumbnail, never below 1x1
    """
    source_width, source_height = source_size
    target_width, target_height = target_size

    source_ratio = source_width / source_height
    target_ratio = target_width / target_height

    if source_ratio > target_ratio:
        # Source is wider - fit to width
        new_width = target_width
        new_height = int(target_width / source_ratio)
    else:
        # Source is taller - fit to height
        new_height = target_height
        new_width = int(target_height * source_ratio)

    return (max(1, new_width), max(1, new_height))


def prepare_for_resize(img: Image.Image) -> Image.Image:
    """
    Convert palette and bilevel rasters to a mode LANCZOS can filter.

    Pillow silently falls back to nearest-neighbour for "P" and "1".
    """
    if img.mode in RESAMPLABLE_MODES:
        return img
    if img.mode == "1":
        return img.convert("L")
    return img.convert("RGBA" if has_alpha(img) else "RGB")


def conform_mode_for_format(img: Image.Image, target_format: DetectedFormat) -> Image.Image:
    """Convert the raster to a mode the target encoder accepts."""
    allowed = ENCODER_MODES.get(target_format, frozenset())
    if img.mode in allowed:
        return img
    if "RGBA" in allowed and has_alpha(img):
        return img.convert("RGBA")
    return img.convert("RGB")


def _save_options(target_format: DetectedFormat, quality: int) -> Dict[str, Any]:
    if target_format is DetectedFormat.JPEG:
        return {"quality": quality, "optimize": True, "progressive": True}
    if target_format is DetectedFormat.WEBP:
        return {"quality": quality, "method": 4}
    if target_format is DetectedFormat.PNG:
        return {"optimize": True}
    return {}


def encode_image(img: Image.Image, target_format: DetectedFormat, quality: int) -> bytes:
    """
    Encode a raster into the given container format.

    Args:
        img: Raster to encode
        target_format: Output container, must not be UNKNOWN
        quality: Quality for lossy encoders (1-95)

    Returns:
        Encoded bytes

    Raises:
        ValueError: target_format is UNKNOWN
        OSError: The encoder rejected the raster
    """
    output = conform_mode_for_format(img, target_format)
    buffer = io.BytesIO()
    output.save(buffer, target_format.pil_format, **_save_options(target_format, quality))
    return buffer.getvalue()


def stretch_to_size(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """Scale straight to (width, height), ignoring the source aspect ratio."""
    return prepare_for_resize(img).resize(size, Image.Resampling.LANCZOS)


def fit_on_canvas(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
    """
    Scale preserving aspect ratio and centre on an exact-size canvas.

    Transparent sources get a transparent canvas; everything else is
    padded with FIT_BACKGROUND_RGB.
    """
    source = prepare_for_resize(img)
    canvas_mode = "RGBA" if has_alpha(source) else "RGB"
    source = source.convert(canvas_mode)

    fitted_size = calculate_thumbnail_dimensions(source.size, size)
    fitted = source.resize(fitted_size, Image.Resampling.LANCZOS)

    background = FIT_BACKGROUND_RGB + (0,) if canvas_mode == "RGBA" else FIT_BACKGROUND_RGB
    final_img = Image.new(canvas_mode, size, background)
    paste_x = (size[0] - fitted.width) // 2
    paste_y = (size[1] - fitted.height) // 2
    final_img.paste(fitted, (paste_x, paste_y))
    return final_img
