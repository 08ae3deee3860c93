"""Summary pipeline: scan -> sort -> render."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from book_summary.config import (
    BOOK_SUMMARY_FORMAT,
    BOOK_SUMMARY_INDENT,
    BOOK_SUMMARY_MAX_DEPTH,
    BOOK_SUMMARY_OUTPUT_FILE,
    BOOK_SUMMARY_TITLE,
)
from book_summary.exceptions import EmptyTreeError
from book_summary.renderer import render
from book_summary.scanner import scan_book
from book_summary.schemas import SummaryFormat, SummaryResult
from book_summary.sorting import apply_sort
from book_summary.titles import ReadText
from book_summary.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class SummaryOptions:
    """Options for summary generation.

    Attributes:
        format: Target book tool ("md" for mdBook, "git" for GitBook).
        title: Title written as the summary's first heading.
        sort: Top-level chapter names to pin to the front, in order.
        mdheader: Title files by their first markdown heading.
        output_file: Summary file name, excluded from the scan.
        follow_symlinks: Descend into symlinked directories.
        max_depth: Deepest directory level to descend into.
        indent: Spaces per nesting level.
        fail_on_empty: Raise EmptyTreeError instead of rendering an empty
            summary.
    """

    format: SummaryFormat = SummaryFormat(BOOK_SUMMARY_FORMAT)
    title: str = BOOK_SUMMARY_TITLE
    sort: list[str] = field(default_factory=list)
    mdheader: bool = False
    output_file: str = BOOK_SUMMARY_OUTPUT_FILE
    follow_symlinks: bool = False
    max_depth: int = BOOK_SUMMARY_MAX_DEPTH
    indent: int = BOOK_SUMMARY_INDENT
    fail_on_empty: bool = False


def generate_summary(
    root: Path,
    options: SummaryOptions | None = None,
    *,
    read_text: ReadText | None = None,
) -> SummaryResult:
    """Scan ``root`` and render its summary file content.

    Args:
        root: Notes directory to scan.
        options: Generation options. Uses defaults if None.
        read_text: Reads file content for header titles.

    Returns:
        SummaryResult with the rendered content, the sorted tree and any
        directories that had to be skipped.

    Raises:
        ScanError: If ``root`` is not a directory.
        EmptyTreeError: If no chapters were found and ``fail_on_empty`` is set.
    """
    opts = options or SummaryOptions()

    scan = scan_book(
        root,
        output_file=opts.output_file,
        mdheader=opts.mdheader,
        follow_symlinks=opts.follow_symlinks,
        max_depth=opts.max_depth,
        read_text=read_text,
    )
    if scan.skipped:
        logger.warning(
            "Some directories were skipped",
            extra={"skipped": len(scan.skipped), "root": str(root)},
        )

    if scan.is_empty:
        if opts.fail_on_empty:
            raise EmptyTreeError(f"No markdown files found under {root}")
        logger.warning("No markdown files found", extra={"root": str(root)})

    tree = scan.tree
    tree.children = apply_sort(tree.children, opts.sort)

    content = render(tree, opts.format, opts.title, indent=opts.indent)
    chapter_count = tree.count_chapters()
    logger.info(
        "Rendered summary",
        extra={
            "chapters": chapter_count,
            "files": scan.count_leaves(),
            "format": SummaryFormat(opts.format).value,
        },
    )

    return SummaryResult(
        content=content,
        tree=tree,
        skipped=scan.skipped,
        chapter_count=chapter_count,
        is_empty=scan.is_empty,
    )
