"""Image-type sniffing and decoding, backed by Pillow."""

import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from img2text.errors import DecodeFailure, ImageTypeIdentificationFailed, UnsupportedImageType
from img2text.model import ImageType, RawImageBuffer

logger = logging.getLogger(__name__)

# Pillow format names -> supported types. MPO is a multi-frame JPEG written by many cameras.
_FORMATS = {
    "JPEG": ImageType.JPEG,
    "MPO": ImageType.JPEG,
    "PNG": ImageType.PNG,
}


def identify_image_type(data: bytes) -> ImageType:
    try:
        with Image.open(io.BytesIO(data)) as image:
            fmt = image.format
    except UnidentifiedImageError as e:
        raise ImageTypeIdentificationFailed() from e
    except Image.DecompressionBombError as e:
        raise DecodeFailure(f"Image could not be decoded: {e}") from e
    if not fmt:
        raise ImageTypeIdentificationFailed()
    if fmt not in _FORMATS:
        raise UnsupportedImageType(f"Unsupported Image Type: {fmt}")
    logger.debug("Identified image as %s", fmt)
    return _FORMATS[fmt]


def _to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit grayscale down to 8 bits; Pillow's own conversion clamps instead."""
    if image.mode == "I" or image.mode.startswith("I;16"):
        return Image.fromarray((np.asarray(image).astype(np.uint32) >> 8).astype(np.uint8))
    return image


def decode(data: bytes, image_type: ImageType) -> RawImageBuffer:
    """Decode to RGBA and expose the pixels in the layout used for ``image_type``.

    Images without an alpha channel get a fully opaque one.
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            rgba = _to_8bit(image).convert("RGBA")
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeFailure(f"Image could not be decoded: {e}") from e

    width, height = rgba.size
    if image_type is ImageType.JPEG:
        pixel_data = rgba.tobytes().hex()
    else:
        pixel_data = np.asarray(rgba, dtype=np.uint8).ravel()
    logger.debug("Decoded %dx%d %s image", width, height, image_type.value)
    return RawImageBuffer(width=width, height=height, image_type=image_type, data=pixel_data)
