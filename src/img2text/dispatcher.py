"""Reconcile the per-format pixel layouts into a single :class:`PixelGrid`.

JPEG pixels arrive as one hex string, eight characters per RGBA pixel. PNG
pixels arrive as a flat byte array, four entries per RGBA pixel. Both end up
as the same (N, 4) uint8 array so a single renderer handles either format.
"""

import logging

import numpy as np

from img2text.errors import DecodeFailure, IncompletePixelData
from img2text.model import CHANNELS, ImageType, PixelGrid, RawImageBuffer

logger = logging.getLogger(__name__)

HEX_CHARS_PER_PIXEL = CHANNELS * 2


def from_hex(hex_string: str, width: int, height: int) -> PixelGrid:
    if len(hex_string) % HEX_CHARS_PER_PIXEL != 0:
        raise IncompletePixelData(
            f"Pixel Data is incomplete: hex length {len(hex_string)} is not a multiple of {HEX_CHARS_PER_PIXEL}"
        )
    try:
        raw = bytes.fromhex(hex_string)
    except ValueError as e:
        raise DecodeFailure(f"Malformed hex pixel data: {e}") from e
    # fromhex skips whitespace, so every character must have become half a byte
    if len(raw) * 2 != len(hex_string):
        raise DecodeFailure("Malformed hex pixel data: unexpected whitespace")
    pixels = np.frombuffer(raw, dtype=np.uint8).reshape(-1, CHANNELS)
    return PixelGrid(width=width, height=height, pixels=pixels)


def from_bytes(buffer: bytes | bytearray | np.ndarray, width: int, height: int) -> PixelGrid:
    if isinstance(buffer, np.ndarray):
        arr = np.asarray(buffer, dtype=np.uint8).ravel()
    else:
        arr = np.frombuffer(bytes(buffer), dtype=np.uint8)
    if len(arr) % CHANNELS != 0:
        raise IncompletePixelData(
            f"Pixel Data is incomplete: byte length {len(arr)} is not a multiple of {CHANNELS}"
        )
    return PixelGrid(width=width, height=height, pixels=arr.reshape(-1, CHANNELS))


def normalize(raw: RawImageBuffer) -> PixelGrid:
    logger.debug("Normalizing %s pixel data (%dx%d)", raw.image_type.value, raw.width, raw.height)
    if raw.image_type is ImageType.JPEG:
        return from_hex(raw.data, raw.width, raw.height)
    return from_bytes(raw.data, raw.width, raw.height)
