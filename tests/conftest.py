"""Test setup for book-summary."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


MakeBook = Callable[[dict[str, str | None]], Path]


@pytest.fixture
def make_book(tmp_path: Path) -> MakeBook:
    """Create a notes directory from ``{relative_path: content}``.

    A value of None creates an empty directory instead of a file.
    """

    def _make(files: dict[str, str | None]) -> Path:
        root = tmp_path / "book"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by the CLI so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("book_summary")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
