"""Read title and source directory from mdBook/GitBook config files."""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from book_summary.exceptions import ConfigError
from book_summary.schemas import BookConfig, SummaryFormat

logger = logging.getLogger(__name__)

_CONFIG_FILES: dict[SummaryFormat, tuple[str, ...]] = {
    SummaryFormat.MD: ("book.toml",),
    SummaryFormat.GIT: ("book.json", "book.js"),
}


def load_book_config(directory: Path, format: SummaryFormat | str) -> BookConfig | None:
    """Look for the book tool's config file in ``directory``.

    mdBook keeps ``title`` and ``src`` under ``[book]`` in ``book.toml``.
    GitBook keeps ``title`` and ``root`` at the top level of ``book.json``
    (or ``book.js`` holding the same JSON); when both exist the later file
    wins.

    Returns:
        The merged settings, or None if no config file exists.

    Raises:
        ConfigError: If a config file cannot be read or parsed.
    """
    config: BookConfig | None = None
    for file_name in _CONFIG_FILES[SummaryFormat(format)]:
        path = Path(directory) / file_name
        if not path.is_file():
            logger.debug("Book config file %s not found", path)
            continue

        values = _read_config_file(path)
        if path.suffix == ".toml":
            section = values.get("book")
            if not isinstance(section, dict):
                section = {}
            source, title = section.get("src"), section.get("title")
        else:
            source, title = values.get("root"), values.get("title")

        config = config or BookConfig()
        config.config_files.append(path)
        if isinstance(source, str) and source:
            config.source_dir = path.parent / source
            logger.info("Found source directory in %s: %s", path.name, source)
        if isinstance(title, str) and title:
            config.title = title
            logger.info("Found title in %s: %s", path.name, title)

    return config


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Couldn't read {path}: {exc}") from exc

    try:
        if path.suffix == ".toml":
            values = tomllib.loads(content)
        else:
            values = json.loads(content)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Couldn't parse {path}: {exc}") from exc

    if not isinstance(values, dict):
        raise ConfigError(f"Expected an object at the top level of {path}")
    return values
