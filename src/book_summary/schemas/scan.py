"""Scan and summary result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from book_summary.schemas.chapter import Chapter


class SkippedEntry(BaseModel):
    """A file or directory that was left out of the scan, and why."""

    path: str
    reason: str


class ScanResult(BaseModel):
    """Tree produced by a scan plus the entries that could not be visited."""

    tree: Chapter
    skipped: list[SkippedEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.tree.children

    def count_leaves(self) -> int:
        return sum(1 for _ in self.tree.iter_leaves())


class SummaryResult(BaseModel):
    """Final summary output."""

    content: str
    tree: Chapter
    skipped: list[SkippedEntry] = Field(default_factory=list)
    chapter_count: int = 0
    is_empty: bool = False
