import argparse
import logging
import sys

from img2text import terminal
from img2text.converter import convert_file
from img2text.errors import ConversionError, MissingArgument

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="img2text",
        description="Convert a JPEG or PNG image to text art, one character per pixel",
    )
    parser.add_argument("image", nargs="?", help="Path to the image to convert")
    parser.add_argument(
        "-o", "--output", default=None, help="Output file (default: <image name>.txt in the current directory)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log each conversion step")
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    if args.image is None:
        parser.print_help()
        terminal.error(str(MissingArgument()))
        sys.exit(EXIT_USAGE)

    try:
        written = convert_file(args.image, output=args.output)
    except (ConversionError, OSError) as e:
        terminal.error(str(e))
        sys.exit(EXIT_FAILURE)

    terminal.info(f"Image Text Saved! ({written})")


if __name__ == "__main__":
    main()
