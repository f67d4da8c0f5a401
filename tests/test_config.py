"""Tests for diagram_layout.config — theme merging and lookup."""

import pytest

from diagram_layout.config import DARK_THEME, DEFAULT_THEME, THEMES, ThemeConfig, get_theme


class TestDefaults:
    def test_default_metrics(self):
        theme = ThemeConfig()
        assert theme.node.font_size == 14
        assert theme.node.min_width == 100
        assert theme.node.max_width == 280
        assert theme.spacing.rank_sep == 60
        assert theme.spacing.node_sep == 40
        assert theme.edge.arrow_size == 8
        assert theme.group.gap == 40

    def test_sections_are_independent_instances(self):
        a = ThemeConfig()
        b = ThemeConfig()
        a.node.font_size = 20
        assert b.node.font_size == 14


class TestFromDict:
    def test_partial_override(self):
        theme = ThemeConfig.from_dict({"spacing": {"rankSep": 90}, "node": {"paddingX": 8}})
        assert theme.spacing.rank_sep == 90
        assert theme.spacing.node_sep == 40
        assert theme.node.padding_x == 8
        assert theme.node.padding_y == 12

    def test_nested_icon_section(self):
        theme = ThemeConfig.from_dict({"node": {"icon": {"dominantSize": 64}}})
        assert theme.node.icon.dominant_size == 64
        assert theme.node.icon.size == 24

    def test_base_not_mutated(self):
        ThemeConfig.from_dict({"edge": {"arrowSize": 20}}, base=DEFAULT_THEME)
        assert DEFAULT_THEME.edge.arrow_size == 8

    def test_unknown_option_raises(self):
        with pytest.raises(ValueError, match="theme.node.glow"):
            ThemeConfig.from_dict({"node": {"glow": 3}})


class TestGetTheme:
    def test_none_is_default(self):
        assert get_theme(None) == DEFAULT_THEME

    def test_by_name(self):
        assert get_theme("dark") == DARK_THEME
        assert set(THEMES) == {"default", "dark"}

    def test_builtin_themes_returned_as_copies(self):
        theme = get_theme("default")
        theme.spacing.rank_sep = 500
        theme.node.icon.size = 99
        assert get_theme(None).spacing.rank_sep == 60
        assert get_theme("default").node.icon.size == 24
        assert DEFAULT_THEME.spacing.rank_sep == 60

    def test_config_passthrough(self):
        custom = ThemeConfig(name="custom")
        assert get_theme(custom) is custom

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            get_theme("neon")

    def test_dark_keeps_default_metrics(self):
        assert DARK_THEME.name == "dark"
        assert DARK_THEME.canvas.background == "#0F172A"
        assert DARK_THEME.spacing == DEFAULT_THEME.spacing
        assert DARK_THEME.node.font_size == DEFAULT_THEME.node.font_size
