"""Shared schemas for book-summary."""

from book_summary.schemas.book import BookConfig
from book_summary.schemas.chapter import Chapter, SummaryFormat
from book_summary.schemas.scan import ScanResult, SkippedEntry, SummaryResult

__all__ = ["BookConfig", "Chapter", "ScanResult", "SkippedEntry", "SummaryFormat", "SummaryResult"]
