from dataclasses import dataclass
from enum import Enum

import numpy as np

from img2text.errors import IncompletePixelData

CHANNELS = 4  # RGBA


class ImageType(Enum):
    JPEG = "image/jpeg"
    PNG = "image/png"


@dataclass(frozen=True)
class RawImageBuffer:
    """Decoded pixels before normalization.

    ``data`` is a hex string for JPEG and a flat uint8 array for PNG.
    """

    width: int
    height: int
    image_type: ImageType
    data: str | np.ndarray


@dataclass(frozen=True)
class PixelGrid:
    width: int
    height: int
    pixels: np.ndarray  # (width * height, 4) uint8, row-major

    def __post_init__(self):
        try:
            pixels = np.asarray(self.pixels, dtype=np.uint8)
        except (ValueError, TypeError, OverflowError) as e:
            raise IncompletePixelData(f"Malformed pixel data: {e}") from e
        if pixels.size == 0:
            pixels = pixels.reshape(0, CHANNELS)
        if pixels.ndim != 2 or pixels.shape[1] != CHANNELS:
            raise IncompletePixelData(f"Expected RGBA pixels, got array of shape {pixels.shape}")
        expected = self.width * self.height
        if len(pixels) != expected:
            raise IncompletePixelData(
                f"Pixel Data is incomplete: {len(pixels)} pixels for a {self.width}x{self.height} image"
            )
        object.__setattr__(self, "pixels", pixels)


@dataclass(frozen=True)
class TextFrame:
    lines: tuple[str, ...]

    @property
    def width(self) -> int:
        return len(self.lines[0]) if self.lines else 0

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        """File contents: every row terminated by a line break, the last one included."""
        return "".join(line + "\n" for line in self.lines)

    def __str__(self) -> str:
        return self.text
