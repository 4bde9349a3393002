import logging
import os
import tempfile
from pathlib import Path

from img2text.dispatcher import normalize
from img2text.errors import ImagePathInvalid
from img2text.model import TextFrame
from img2text.renderer import render
from img2text.source import decode, identify_image_type

logger = logging.getLogger(__name__)


def _file_mode() -> int:
    """Permissions a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def image_to_text(path: str | Path) -> TextFrame:
    """Run the conversion pipeline on an image file and return the rendered frame.

    Every step raises a :class:`~img2text.errors.ConversionError` on failure,
    which ends the conversion.
    """
    path = Path(path)
    if not path.is_file():
        raise ImagePathInvalid(f"Image Path is Invalid: {path}")

    data = path.read_bytes()
    image_type = identify_image_type(data)
    raw = decode(data, image_type)
    grid = normalize(raw)
    return render(grid)


def output_path_for(path: str | Path, directory: str | Path | None = None) -> Path:
    """``<stem>.txt`` in ``directory``, or the current working directory."""
    directory = Path(directory) if directory is not None else Path.cwd()
    return directory / f"{Path(path).stem}.txt"


def write_frame(frame: TextFrame, path: str | Path) -> None:
    """Write the frame atomically: the target either holds the full text or is untouched."""
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(frame.text)
        os.chmod(tmp, _file_mode())
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise
    logger.debug("Wrote %d lines to %s", frame.height, path)


def convert_file(image_path: str | Path, output: str | Path | None = None) -> Path:
    frame = image_to_text(image_path)
    target = Path(output) if output is not None else output_path_for(image_path)
    write_frame(frame, target)
    return target
