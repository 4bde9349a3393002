import logging

from img2text.classifier import classify_array
from img2text.errors import InvalidDimensions
from img2text.model import PixelGrid, TextFrame

logger = logging.getLogger(__name__)


def render(grid: PixelGrid) -> TextFrame:
    """Turn a pixel grid into text, one glyph per pixel and one line per pixel row.

    Alpha is ignored. Pixels are consumed in row-major order and a line ends
    after every pixel whose ``(index + 1) % width == 0``.
    """
    if grid.width <= 0 or grid.height <= 0:
        raise InvalidDimensions(f"Image dimensions must be positive, got {grid.width}x{grid.height}")

    glyphs = classify_array(grid.pixels[:, :3])
    lines = []
    row: list[str] = []
    for index, glyph in enumerate(glyphs):
        row.append(str(glyph))
        if (index + 1) % grid.width == 0:
            lines.append("".join(row))
            row = []

    logger.debug("Rendered %d lines of %d glyphs", len(lines), grid.width)
    return TextFrame(lines=tuple(lines))
