import sys
from typing import TextIO

RED = (255, 85, 85)
GREEN = (85, 255, 85)


def colourize(text: str, colour: tuple[int, int, int], stream: TextIO | None = None) -> str:
    """Wrap text in a truecolor ANSI escape, or return it unchanged if the stream is not a tty."""
    stream = stream if stream is not None else sys.stdout
    if not stream.isatty():
        return text
    r, g, b = colour
    return f"\033[38;2;{r};{g};{b}m{text}\033[0m"


def info(message: str, stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stdout
    print(colourize(f"Info: {message}", GREEN, stream), file=stream)


def error(message: str, stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stderr
    print(colourize(f"Error: {message}", RED, stream), file=stream)
