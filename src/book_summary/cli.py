"""Command line entry point: generate SUMMARY.md for a notes directory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from book_summary.book_config import load_book_config
from book_summary.config import (
    BOOK_SUMMARY_FORMAT,
    BOOK_SUMMARY_MAX_DEPTH,
    BOOK_SUMMARY_OUTPUT_FILE,
    BOOK_SUMMARY_TITLE,
)
from book_summary.exceptions import BookSummaryError
from book_summary.schemas import SummaryFormat
from book_summary.summary import SummaryOptions, generate_summary
from book_summary.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_DEFAULT_NOTES_DIR = "."


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the book-summary command."""
    parser = argparse.ArgumentParser(
        prog="book-summary",
        description="Create a SUMMARY.md for mdBook or GitBook from a directory of markdown notes.",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Activate debug mode")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Verbose mode (-v, -vv)"
    )
    parser.add_argument(
        "-m", "--mdheader", action="store_true", help="Title from md file header"
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[member.value for member in SummaryFormat],
        default=BOOK_SUMMARY_FORMAT,
        help="Format md/git book (default: %(default)s)",
    )
    parser.add_argument(
        "-t", "--title", default=BOOK_SUMMARY_TITLE, help="Title for summary (default: %(default)s)"
    )
    parser.add_argument(
        "-s", "--sort", nargs="+", default=[], metavar="NAME", help="Start with following chapters"
    )
    parser.add_argument(
        "-o",
        "--outputfile",
        default=BOOK_SUMMARY_OUTPUT_FILE,
        help="Output file (default: %(default)s)",
    )
    parser.add_argument(
        "-n",
        "--notesdir",
        default=_DEFAULT_NOTES_DIR,
        help="Notes dir where to parse all your notes from (default: %(default)s)",
    )
    parser.add_argument(
        "-y", "--overwrite", action="store_true", help="Overwrite existing output file"
    )
    parser.add_argument(
        "--follow-symlinks", action="store_true", help="Descend into symlinked directories"
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=BOOK_SUMMARY_MAX_DEPTH,
        help="Deepest directory level to scan (default: %(default)s)",
    )
    parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Write a summary even when no markdown files are found",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Run the command line tool and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, debug=args.debug)
    logger.debug("Parsed arguments", extra={"options": vars(args)})

    notes_dir = Path(args.notesdir)
    title = args.title

    try:
        book_config = load_book_config(notes_dir, args.format)
    except BookSummaryError as exc:
        logger.error("%s", exc)
        return 1
    if book_config is not None:
        if book_config.source_dir is not None and args.notesdir == _DEFAULT_NOTES_DIR:
            notes_dir = book_config.source_dir
        if book_config.title and args.title == BOOK_SUMMARY_TITLE:
            title = book_config.title

    if not notes_dir.is_dir():
        logger.error("Path %s not found!", notes_dir)
        return 1

    options = SummaryOptions(
        format=SummaryFormat(args.format),
        title=title,
        sort=list(args.sort),
        mdheader=args.mdheader,
        output_file=args.outputfile,
        follow_symlinks=args.follow_symlinks,
        max_depth=args.max_depth,
        fail_on_empty=not args.allow_empty,
    )

    try:
        result = generate_summary(notes_dir, options)
    except BookSummaryError as exc:
        logger.error("%s", exc)
        return 1

    output_path = notes_dir / args.outputfile
    if output_path.exists() and not args.overwrite:
        if not confirm_overwrite(output_path, input_fn=input_fn):
            print(f"Left {output_path} unchanged")
            return 0

    try:
        output_path.write_text(result.content, encoding="utf-8")
    except OSError as exc:
        logger.error("Couldn't write %s: %s", output_path, exc)
        return 1

    print(f"Successfully created {output_path}")
    return 0


def confirm_overwrite(path: Path, *, input_fn: Callable[[str], str] = input) -> bool:
    """Ask until the user answers; an empty answer means yes."""
    while True:
        try:
            answer = input_fn(
                f"File {path.name} already exists, do you want to overwrite it? [Y/n] "
            )
        except EOFError:
            return False
        answer = answer.strip().lower()
        if answer in ("", "y", "yes"):
            return True
        if answer in ("n", "no"):
            return False


if __name__ == "__main__":
    sys.exit(main())
