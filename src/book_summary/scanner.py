"""Walk a notes directory and build the table of contents tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from book_summary.config import (
    BOOK_SUMMARY_MAX_DEPTH,
    BOOK_SUMMARY_OUTPUT_FILE,
    DEFAULT_TITLE,
    INDEX_FILE_NAME,
)
from book_summary.exceptions import ScanError
from book_summary.schemas import Chapter, ScanResult, SkippedEntry
from book_summary.titles import ReadText, is_markdown, resolve_title

logger = logging.getLogger(__name__)


@dataclass
class _ScanState:
    root: Path
    output_file: str
    mdheader: bool
    follow_symlinks: bool
    max_depth: int
    read_text: ReadText | None
    ancestors: set[Path] = field(default_factory=set)
    skipped: list[SkippedEntry] = field(default_factory=list)

    def skip(self, path: Path, reason: str) -> None:
        relative = _relative_posix(path, self.root) or "."
        logger.warning("Skipping %s: %s", relative, reason)
        self.skipped.append(SkippedEntry(path=relative, reason=reason))


def scan_book(
    root_path: Path,
    *,
    output_file: str = BOOK_SUMMARY_OUTPUT_FILE,
    mdheader: bool = False,
    follow_symlinks: bool = False,
    max_depth: int = BOOK_SUMMARY_MAX_DEPTH,
    read_text: ReadText | None = None,
) -> ScanResult:
    """Scan a notes directory into a chapter tree.

    Entries are visited in ascending order of their raw file names. Hidden
    entries, the output file, the root README and non-markdown files are
    left out. A README inside a sub-directory becomes that section's index.
    Directories without any markdown below them are dropped.

    Args:
        root_path: Directory to scan.
        output_file: Summary file name relative to ``root_path``; excluded so
            re-runs do not list the summary in itself.
        mdheader: Title files by their first markdown heading.
        follow_symlinks: Descend into symlinked directories, guarded against
            loops by tracking resolved paths.
        max_depth: Deepest directory level to descend into.
        read_text: Reads file content for header titles.

    Returns:
        ScanResult with the tree (rooted at a synthetic chapter) and every
        entry that had to be skipped.

    Raises:
        ScanError: If ``root_path`` is not a directory.
    """
    root = Path(root_path)
    if not root.is_dir():
        raise ScanError(f"Path {root} is not a directory")

    state = _ScanState(
        root=root,
        output_file=PurePosixPath(output_file.replace("\\", "/")).as_posix(),
        mdheader=mdheader,
        follow_symlinks=follow_symlinks,
        max_depth=max_depth,
        read_text=read_text,
    )
    state.ancestors.add(root.resolve())

    tree = Chapter(title=DEFAULT_TITLE, path="", name=root.name, is_section=True)
    # The root README is the book's landing page, not a chapter.
    tree.children, _ = _scan_directory(root, depth=0, state=state)

    return ScanResult(tree=tree, skipped=state.skipped)


def build_tree(root_path: Path, **options) -> Chapter:
    """Build the chapter tree for ``root_path``; see ``scan_book`` for options."""
    return scan_book(root_path, **options).tree


def _scan_directory(
    directory: Path, *, depth: int, state: _ScanState
) -> tuple[list[Chapter], str | None]:
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        state.skip(directory, f"cannot list directory ({exc.strerror or exc})")
        return [], None

    children: list[Chapter] = []
    index_path: str | None = None

    for entry in entries:
        if entry.name.startswith("."):
            continue
        relative = _relative_posix(entry, state.root)

        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            state.skip(entry, f"cannot stat entry ({exc.strerror or exc})")
            continue

        if is_dir:
            section = _scan_section(entry, relative, depth=depth + 1, state=state)
            if section is not None:
                children.append(section)
            continue

        if not is_file or not is_markdown(entry):
            continue
        if relative == state.output_file:
            continue
        if entry.name.lower() == INDEX_FILE_NAME:
            index_path = relative
            continue

        children.append(
            Chapter(
                title=resolve_title(entry, state.mdheader, read_text=state.read_text),
                path=relative,
                name=entry.name,
            )
        )

    return children, index_path


def _scan_section(
    directory: Path, relative: str, *, depth: int, state: _ScanState
) -> Chapter | None:
    if directory.is_symlink():
        if not state.follow_symlinks:
            logger.debug("Not following symlinked directory %s", relative)
            return None
        resolved = directory.resolve()
        if resolved in state.ancestors:
            state.skip(directory, "symlink loop")
            return None
    else:
        resolved = directory.resolve()

    if depth > state.max_depth:
        state.skip(directory, f"deeper than max depth {state.max_depth}")
        return None

    state.ancestors.add(resolved)
    try:
        children, index_path = _scan_directory(directory, depth=depth, state=state)
    finally:
        state.ancestors.discard(resolved)

    if not children and index_path is None:
        return None

    return Chapter(
        title=resolve_title(directory, state.mdheader, read_text=state.read_text),
        path=relative,
        name=directory.name,
        is_section=True,
        index_path=index_path,
        children=children,
    )


def _relative_posix(path: Path, root: Path) -> str:
    relative = path.relative_to(root).as_posix()
    return "" if relative == "." else relative
