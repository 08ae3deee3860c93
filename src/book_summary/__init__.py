"""book-summary: build SUMMARY.md files for mdBook and GitBook."""

from book_summary.book_config import load_book_config
from book_summary.exceptions import (
    BookSummaryError,
    ConfigError,
    EmptyTreeError,
    ScanError,
)
from book_summary.renderer import render
from book_summary.scanner import build_tree, scan_book
from book_summary.schemas import (
    BookConfig,
    Chapter,
    ScanResult,
    SkippedEntry,
    SummaryFormat,
    SummaryResult,
)
from book_summary.sorting import apply_sort
from book_summary.summary import SummaryOptions, generate_summary
from book_summary.titles import resolve_title

__all__ = [
    "BookConfig",
    "BookSummaryError",
    "Chapter",
    "ConfigError",
    "EmptyTreeError",
    "ScanError",
    "ScanResult",
    "SkippedEntry",
    "SummaryFormat",
    "SummaryOptions",
    "SummaryResult",
    "apply_sort",
    "build_tree",
    "generate_summary",
    "load_book_config",
    "render",
    "resolve_title",
    "scan_book",
]
