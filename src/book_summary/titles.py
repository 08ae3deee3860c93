"""Derive display titles for files and folders."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable

from book_summary.config import MARKDOWN_SUFFIXES

logger = logging.getLogger(__name__)

ReadText = Callable[[Path], str]

_ORDER_PREFIX_RE = re.compile(r"^\d+(?:[\s._-]+|$)")
_SEPARATOR_RE = re.compile(r"[\s_-]+")
_HEADING_RE = re.compile(r"^ {0,3}#{1,6}(?:[ \t]+(?P<text>.*?))?(?:[ \t]+#+)?[ \t]*$")
_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")
# Kept lowercase unless they open the title.
_SMALL_WORDS = frozenset(
    {"a", "an", "and", "as", "at", "but", "by", "for", "in", "nor", "of", "on", "or", "the", "to"}
)


def is_markdown(path: Path) -> bool:
    """Return True if the path has a markdown file extension."""
    return path.suffix.lower() in MARKDOWN_SUFFIXES


def title_from_name(name: str, *, is_dir: bool = False) -> str:
    """Turn a file or folder name into a display title.

    ``01-getting_started.md`` becomes ``Getting Started`` and
    ``first_part_of_part_2.md`` becomes ``First Part of Part 2``. The extension is
    only stripped for files, so ``v1.2`` stays intact as a folder name.
    """
    base = name if is_dir else Path(name).stem or name
    stripped = _ORDER_PREFIX_RE.sub("", base, count=1)
    if stripped.strip(" _-."):
        base = stripped
    words = [word for word in _SEPARATOR_RE.split(base) if word]
    if not words:
        return name
    return " ".join(
        word if index and word in _SMALL_WORDS else word[:1].upper() + word[1:]
        for index, word in enumerate(words)
    )


def extract_header_title(text: str) -> str | None:
    """Return the text of the first ATX heading outside fenced code blocks."""
    fence: str | None = None
    for line in text.splitlines():
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group("fence")
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue
        heading = _HEADING_RE.match(line)
        if heading and heading.group("text"):
            return heading.group("text").strip()
    return None


def resolve_title(
    entry: Path,
    mdheader_mode: bool = False,
    *,
    read_text: ReadText | None = None,
) -> str:
    """Resolve the display title for a file or directory.

    Args:
        entry: Filesystem entry to title.
        mdheader_mode: Prefer the first markdown heading inside the file.
        read_text: Reads file content; defaults to UTF-8 from disk.

    Returns:
        The heading text when ``mdheader_mode`` is on and the file has one,
        otherwise a title derived from the entry's name.
    """
    is_dir = entry.is_dir()
    if mdheader_mode and not is_dir and is_markdown(entry):
        reader = read_text or _read_utf8
        try:
            header = extract_header_title(reader(entry))
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read %s for a header title: %s", entry, exc)
        else:
            if header:
                return header
    return title_from_name(entry.name, is_dir=is_dir)


def _read_utf8(path: Path) -> str:
    return path.read_text(encoding="utf-8")
