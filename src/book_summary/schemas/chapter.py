"""Table of contents tree models."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field


class SummaryFormat(str, Enum):
    """Target book tool for the rendered summary."""

    MD = "md"
    GIT = "git"


class Chapter(BaseModel):
    """A node in the table of contents: a markdown file or a section directory.

    Attributes:
        title: Display title.
        path: POSIX path relative to the scan root ("" for the synthetic root).
        name: Raw filesystem base name, used for ordering and sort matching.
        is_section: True when the node stands for a directory.
        index_path: Relative path of the section's README, if it has one.
        children: Ordered child chapters; empty for files.
    """

    title: str = Field(..., min_length=1)
    path: str = ""
    name: str = ""
    is_section: bool = False
    index_path: str | None = None
    children: list["Chapter"] = Field(default_factory=list)

    def iter_leaves(self) -> Iterator["Chapter"]:
        """Yield every file chapter below this node, in render order."""
        for child in self.children:
            if child.is_section:
                yield from child.iter_leaves()
            else:
                yield child

    def count_chapters(self) -> int:
        """Count every node below this one (files and sections)."""
        total = 0
        for child in self.children:
            total += 1 + child.count_chapters()
        return total
