"""Local configuration for book-summary."""

from __future__ import annotations

import os


DEFAULT_TITLE = "Summary"
DEFAULT_OUTPUT_FILE = "SUMMARY.md"
DEFAULT_FORMAT = "md"
DEFAULT_INDENT = 4
DEFAULT_MAX_DEPTH = 64
DEFAULT_LOG_LEVEL = "WARNING"

MARKDOWN_SUFFIXES = (".md", ".markdown")
INDEX_FILE_NAME = "readme.md"

BOOK_SUMMARY_TITLE = os.getenv("BOOK_SUMMARY_TITLE", DEFAULT_TITLE)
BOOK_SUMMARY_OUTPUT_FILE = os.getenv("BOOK_SUMMARY_OUTPUT_FILE", DEFAULT_OUTPUT_FILE)
BOOK_SUMMARY_FORMAT = os.getenv("BOOK_SUMMARY_FORMAT", DEFAULT_FORMAT)
BOOK_SUMMARY_INDENT = int(os.getenv("BOOK_SUMMARY_INDENT", str(DEFAULT_INDENT)))
BOOK_SUMMARY_MAX_DEPTH = int(os.getenv("BOOK_SUMMARY_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
BOOK_SUMMARY_LOG_LEVEL = os.getenv("BOOK_SUMMARY_LOG_LEVEL", DEFAULT_LOG_LEVEL)
