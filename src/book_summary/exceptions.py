"""Custom exceptions for book-summary."""


class BookSummaryError(Exception):
    """Base exception for book-summary operations."""


class ScanError(BookSummaryError):
    """The notes directory cannot be scanned at all."""


class EmptyTreeError(BookSummaryError):
    """No markdown files were found under the notes directory."""


class ConfigError(BookSummaryError):
    """A book config file exists but cannot be read or parsed."""
