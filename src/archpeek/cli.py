"""Command-line interface for archpeek."""

from __future__ import annotations

import argparse
import logging
import sys

import archpeek
from archpeek.enums import OutputMode
from archpeek.errors import ArchpeekError, SniffError
from archpeek.inspector import list_file, show_file
from archpeek.renderer import ContentRenderer, RenderOptions

_DESCRIPTION = (
    "Display the content of files, ZIP and TAR archives and GZIP/BZIP2 "
    "compressed files without unpacking them.  Only text is printed; binary "
    "content is replaced by a short notice."
)
_FILES_HELP = (
    "Files to read: plain files, .zip, .tar, .gz, .bz2, "
    ".tar.gz/.tgz and .tar.bz2/.tbz2"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="archpeek", description=_DESCRIPTION)
    parser.add_argument("files", nargs="+", metavar="FILES", help=_FILES_HELP)
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="Show the names and sizes of the files instead of their content",
    )
    parser.add_argument(
        "-n",
        "--no-styling",
        action="store_true",
        help="Do not print a header and footer around each file's content",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"archpeek {archpeek.__version__}"
    )
    return parser


def _replace_unencodable_output() -> None:
    """Print characters the console codec cannot encode as ``?``."""
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")


def _process(path: str, mode: OutputMode, renderer: ContentRenderer) -> None:
    if mode is OutputMode.INFO:
        print(f'📂 "{path}"')
        list_file(path, sys.stdout)
    else:
        show_file(path, renderer)


def main(argv: list[str] | None = None) -> None:
    """Run the ``archpeek`` command-line tool.

    Files are handled in the order given.  A file that cannot be read is
    reported on stderr and the remaining files are still processed; the
    exit status is 1 if any file failed.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    _replace_unencodable_output()
    mode = OutputMode.INFO if args.list else OutputMode.CONTENT
    renderer = ContentRenderer(
        sys.stdout, RenderOptions(with_styling=not args.no_styling)
    )

    failed = False
    for filepath in args.files:
        try:
            _process(filepath, mode, renderer)
        except SniffError as e:
            print(
                f"archpeek: could not infer the type of {filepath}: {e}",
                file=sys.stderr,
            )
            failed = True
        except (ArchpeekError, OSError) as e:
            print(f"archpeek: {filepath}: {e}", file=sys.stderr)
            failed = True
        print()

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
