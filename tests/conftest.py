import io
import struct
import zlib

import pytest
from PIL import Image


def encode(image: Image.Image, fmt: str, **params) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt, **params)
    return buf.getvalue()


def gradient_row(grays):
    """A one-row RGB image whose pixels are the given gray levels, left to right."""
    img = Image.new("RGB", (len(grays), 1))
    img.putdata([(v, v, v) for v in grays])
    return img


@pytest.fixture
def black_png(tmp_path):
    path = tmp_path / "black.png"
    Image.new("RGBA", (2, 2), (0, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def white_jpeg(tmp_path):
    path = tmp_path / "white.jpg"
    Image.new("RGB", (3, 2), (255, 255, 255)).save(path, quality=100)
    return path


def png_header_only(width, height):
    """A PNG whose IHDR declares the given size but which carries no pixel data."""

    def chunk(kind, payload):
        body = kind + payload
        return struct.pack(">I", len(payload)) + body + struct.pack(">I", zlib.crc32(body))

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr) + chunk(b"IDAT", zlib.compress(b"")) + chunk(b"IEND", b"")
