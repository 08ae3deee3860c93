"""Render a chapter tree into an mdBook or GitBook summary file."""

from __future__ import annotations

import re

from book_summary.config import BOOK_SUMMARY_INDENT
from book_summary.schemas import Chapter, SummaryFormat

_LIST_CHARS = {SummaryFormat.MD: "-", SummaryFormat.GIT: "*"}
_NEEDS_ANGLE_BRACKETS_RE = re.compile(r"[\s()]")
_TITLE_ESCAPE_RE = re.compile(r"([\[\]])")


def render(
    tree: Chapter,
    format: SummaryFormat | str,
    title: str,
    *,
    indent: int = BOOK_SUMMARY_INDENT,
) -> str:
    """Serialize the chapter tree into summary markdown.

    mdBook (``md``) output::

        # Summary

        - [Intro](intro.md)
        - [Part One](part-one/README.md)
            - [First](part-one/first.md)
        - Notes
            - [Scratch](notes/scratch.md)

    GitBook (``git``) output has the same shape with ``*`` bullets.
    """
    summary_format = SummaryFormat(format)
    lines = [f"# {title}", ""]
    _render_chapters(tree.children, summary_format, indent, 0, lines)
    return "\n".join(lines) + "\n"


def render_line(chapter: Chapter, format: SummaryFormat | str) -> str:
    """Render a single chapter entry without indentation."""
    summary_format = SummaryFormat(format)
    list_char = _LIST_CHARS[summary_format]
    title = _escape_title(chapter.title)

    target = chapter.index_path if chapter.is_section else chapter.path
    if target:
        return f"{list_char} [{title}]({_link_target(target)})"
    return f"{list_char} {title}"


def _render_chapters(
    chapters: list[Chapter],
    summary_format: SummaryFormat,
    indent: int,
    depth: int,
    lines: list[str],
) -> None:
    prefix = " " * (indent * depth)
    for chapter in chapters:
        lines.append(prefix + render_line(chapter, summary_format))
        if chapter.children:
            _render_chapters(chapter.children, summary_format, indent, depth + 1, lines)


def _link_target(path: str) -> str:
    while path.startswith("./"):
        path = path[2:]
    if _NEEDS_ANGLE_BRACKETS_RE.search(path):
        return f"<{path}>"
    return path


def _escape_title(title: str) -> str:
    return _TITLE_ESCAPE_RE.sub(r"\\\1", title)
