"""Ordering of the top-level chapters."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable

from book_summary.schemas import Chapter


def normalize_sort_key(value: str) -> str:
    """Normalize titles and names for case-insensitive comparison."""
    return " ".join(value.split()).casefold()


def apply_sort(
    children: Iterable[Chapter],
    priority: Iterable[str] | None = None,
) -> list[Chapter]:
    """Order the root's children: priority names first, the rest alphabetical.

    A chapter matches a priority name by its title, its raw file name, or the
    file name without extension, all compared case-insensitively. Matched
    chapters follow the order of ``priority``; names that match nothing are
    ignored. Everything else is sorted by title. Both groups keep build order
    for ties, so applying the policy twice gives the same result.
    """
    ranks: dict[str, int] = {}
    for name in priority or []:
        key = normalize_sort_key(name)
        if key and key not in ranks:
            ranks[key] = len(ranks)

    matched: list[tuple[int, Chapter]] = []
    rest: list[Chapter] = []
    for child in children:
        rank = _priority_rank(child, ranks)
        if rank is None:
            rest.append(child)
        else:
            matched.append((rank, child))

    matched.sort(key=lambda item: item[0])
    rest.sort(key=lambda child: normalize_sort_key(child.title))
    return [child for _, child in matched] + rest


def _priority_rank(chapter: Chapter, ranks: dict[str, int]) -> int | None:
    if not ranks:
        return None
    candidates = {chapter.title, chapter.name}
    if not chapter.is_section:
        candidates.add(PurePosixPath(chapter.name).stem)
    found = [ranks[key] for key in map(normalize_sort_key, candidates) if key in ranks]
    return min(found) if found else None
