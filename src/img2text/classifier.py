import numpy as np

# Darkest to lightest
GLYPHS = "@0HIT1"
PIVOT = 255 / 6

_GLYPH_ARRAY = np.array(list(GLYPHS))


def classify(r: int, g: int, b: int) -> str:
    """Map one RGB triple to a glyph by its unweighted channel average."""
    ratio = (r + g + b) / 3 / PIVOT
    for threshold, glyph in enumerate(GLYPHS[:-1], start=1):
        if ratio < threshold:
            return glyph
    return GLYPHS[-1]


def classify_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`classify` over an (N, 3) array. Returns an (N,) array of glyphs."""
    gray = rgb.astype(np.float64).sum(axis=1) / 3
    # floor(x) < k  <=>  x < k for integer k, so this matches the strict thresholds
    buckets = np.minimum(np.floor(gray / PIVOT), len(GLYPHS) - 1).astype(np.intp)
    return _GLYPH_ARRAY[buckets]
