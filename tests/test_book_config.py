"""Tests for book config discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from book_summary.book_config import load_book_config
from book_summary.exceptions import ConfigError


class TestLoadBookConfig:
    """Tests for load_book_config function."""

    def test_returns_none_without_config(self, tmp_path: Path) -> None:
        assert load_book_config(tmp_path, "md") is None
        assert load_book_config(tmp_path, "git") is None

    def test_reads_mdbook_toml(self, tmp_path: Path) -> None:
        (tmp_path / "book.toml").write_text(
            '[book]\ntitle = "MyMDBook"\nsrc = "src"\nauthors = ["me"]\n'
        )

        config = load_book_config(tmp_path, "md")

        assert config is not None
        assert config.title == "MyMDBook"
        assert config.source_dir == tmp_path / "src"
        assert config.config_files == [tmp_path / "book.toml"]

    def test_toml_without_book_table(self, tmp_path: Path) -> None:
        (tmp_path / "book.toml").write_text('[output.html]\ntheme = "x"\n')

        config = load_book_config(tmp_path, "md")

        assert config is not None
        assert config.title is None
        assert config.source_dir is None

    def test_reads_gitbook_json(self, tmp_path: Path) -> None:
        (tmp_path / "book.json").write_text('{"title": "My title", "root": "book"}')

        config = load_book_config(tmp_path, "git")

        assert config is not None
        assert config.title == "My title"
        assert config.source_dir == tmp_path / "book"

    def test_book_js_overrides_book_json(self, tmp_path: Path) -> None:
        (tmp_path / "book.json").write_text('{"title": "From JSON", "root": "book"}')
        (tmp_path / "book.js").write_text('{"title": "From JS"}')

        config = load_book_config(tmp_path, "git")

        assert config is not None
        assert config.title == "From JS"
        assert config.source_dir == tmp_path / "book"
        assert [path.name for path in config.config_files] == ["book.json", "book.js"]

    def test_format_selects_config_file(self, tmp_path: Path) -> None:
        """mdBook config is ignored for GitBook output and vice versa."""
        (tmp_path / "book.toml").write_text('[book]\ntitle = "TOML"\n')
        assert load_book_config(tmp_path, "git") is None

    def test_malformed_toml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "book.toml").write_text("[book\ntitle = ")
        with pytest.raises(ConfigError, match="Couldn't parse"):
            load_book_config(tmp_path, "md")

    def test_malformed_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / "book.json").write_text("{not json")
        with pytest.raises(ConfigError):
            load_book_config(tmp_path, "git")

    def test_non_object_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / "book.json").write_text('["a", "b"]')
        with pytest.raises(ConfigError, match="top level"):
            load_book_config(tmp_path, "git")
