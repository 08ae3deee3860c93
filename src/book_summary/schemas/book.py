"""Book tool config model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class BookConfig(BaseModel):
    """Settings picked up from ``book.toml``, ``book.json`` or ``book.js``.

    Attributes:
        source_dir: Directory holding the chapters, already resolved against
            the config file's location.
        title: Book title.
        config_files: Config files that contributed, in the order read.
    """

    source_dir: Path | None = None
    title: str | None = None
    config_files: list[Path] = Field(default_factory=list)
