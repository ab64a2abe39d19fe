"""Tests for mdtoc configuration management."""

from pathlib import Path

import pytest

from mdtoc.config import CONFIG_FILE_NAME, MdtocConfig, RenderConfig, load_config
from mdtoc.toc.options import TocOptions


class TestRenderConfig:
    """Tests for RenderConfig dataclass."""

    def test_default_values(self):
        config = RenderConfig()
        assert config.preset == "commonmark"
        assert config.anchors is True


class TestMdtocConfig:
    """Tests for MdtocConfig dataclass."""

    def test_default_config(self):
        config = MdtocConfig()
        assert config.toc == TocOptions()
        assert config.render == RenderConfig()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_no_config_file(self, tmp_path: Path):
        config = load_config(tmp_path)
        assert config == MdtocConfig()

    def test_full_config(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE_NAME).write_text(
            """
[toc]
include_levels = [1, 2, 3]
container_class = "toc"
marker_pattern = '^\\[TOC\\]'
list_type = "ol"
container_header_html = "<h2>Contents</h2>"
list_attrs = 'class="toc-list"'

[render]
preset = "gfm-like"
anchors = false
"""
        )

        config = load_config(tmp_path)

        assert config.toc.include_levels == (1, 2, 3)
        assert config.toc.container_class == "toc"
        assert config.toc.marker_pattern.match("[toc]")
        assert config.toc.list_type == "ol"
        assert config.toc.container_header_html == "<h2>Contents</h2>"
        assert config.toc.list_attrs == 'class="toc-list"'
        assert config.render.preset == "gfm-like"
        assert config.render.anchors is False

    def test_partial_config_uses_defaults(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE_NAME).write_text('[toc]\ncontainer_class = "toc"\n')

        config = load_config(tmp_path)

        assert config.toc.container_class == "toc"
        assert config.toc.include_levels == (1, 2)
        assert config.render == RenderConfig()

    def test_unknown_toc_key_raises(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE_NAME).write_text("[toc]\ninclude_level = [1]\n")

        with pytest.raises(ValueError, match="include_level"):
            load_config(tmp_path)

    def test_removed_flag_is_loaded(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE_NAME).write_text("[toc]\nforce_full_toc = true\n")

        config = load_config(tmp_path)

        assert config.toc.force_full_toc is True
