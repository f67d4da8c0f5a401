"""Centralized configuration for diagram-layout.

``ThemeConfig`` holds every metric the layout engine reads (node padding,
font sizes, spacing, group padding, arrow size) plus the colors handed on
to the drawing collaborator. Built-in themes live in ``THEMES``.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

DEFAULT_PADDING: int = 40


@dataclass
class CanvasTheme:
    background: str = "#FFFFFF"


@dataclass
class IconTheme:
    size: float = 24
    margin_bottom: float = 6
    dominant_size: float = 48
    dominant_margin_bottom: float = 8
    dominant_label_font_size: float = 13


@dataclass
class NodeTheme:
    background: str = "#FFFFFF"
    border: str = "#E2E8F0"
    border_width: float = 1.5
    border_radius: float = 10
    text_color: str = "#1E293B"
    text_color_secondary: str = "#64748B"
    font_size: float = 14
    font_weight: int = 500
    description_font_size: float = 12
    padding_x: float = 20
    padding_y: float = 12
    min_width: float = 100
    max_width: float = 280
    shadow: str = "0 1px 3px rgba(0,0,0,0.08)"
    icon: IconTheme = field(default_factory=IconTheme)


@dataclass
class EdgeTheme:
    color: str = "#94A3B8"
    width: float = 1.5
    arrow_size: float = 8
    label_color: str = "#475569"
    label_font_size: float = 12
    label_background: str = "#FFFFFF"


@dataclass
class SpacingTheme:
    rank_sep: float = 60
    node_sep: float = 40


@dataclass
class GroupTheme:
    background: str = "#F8FAFC"
    border: str = "#E2E8F0"
    border_width: float = 1
    border_radius: float = 12
    padding_x: float = 24
    padding_y: float = 20
    label_font_size: float = 13
    label_color: str = "#475569"
    label_margin_bottom: float = 12
    gap: float = 40


@dataclass
class ThemeConfig:
    """All numeric and color metrics for one theme."""

    name: str = "default"
    canvas: CanvasTheme = field(default_factory=CanvasTheme)
    node: NodeTheme = field(default_factory=NodeTheme)
    edge: EdgeTheme = field(default_factory=EdgeTheme)
    spacing: SpacingTheme = field(default_factory=SpacingTheme)
    group: GroupTheme = field(default_factory=GroupTheme)
    font_family: str = "Inter, system-ui, sans-serif"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: ThemeConfig | None = None) -> ThemeConfig:
        """Merge a partial camelCase theme mapping onto ``base`` (default theme if omitted).

        Raises:
            ValueError: If a key does not name a known theme option.
        """
        theme = copy.deepcopy(base if base is not None else ThemeConfig())
        _merge_into(theme, data, path="theme")
        return theme


def _snake_case(key: str) -> str:
    out: list[str] = []
    for ch in key:
        if ch.isupper():
            out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)


def _merge_into(target: object, data: Mapping[str, Any], path: str) -> None:
    known = {f.name for f in fields(target)}  # type: ignore[arg-type]
    for raw_key, value in data.items():
        key = _snake_case(raw_key)
        if key not in known:
            raise ValueError(f"Unknown theme option '{path}.{raw_key}'")
        current = getattr(target, key)
        if isinstance(value, Mapping) and hasattr(current, "__dataclass_fields__"):
            _merge_into(current, value, f"{path}.{raw_key}")
        else:
            setattr(target, key, value)


DEFAULT_THEME = ThemeConfig()

DARK_THEME = ThemeConfig.from_dict(
    {
        "name": "dark",
        "canvas": {"background": "#0F172A"},
        "node": {
            "background": "#1E293B",
            "border": "#334155",
            "textColor": "#F1F5F9",
            "textColorSecondary": "#94A3B8",
            "shadow": "0 2px 8px rgba(0,0,0,0.4)",
        },
        "edge": {"color": "#64748B", "labelColor": "#CBD5E1", "labelBackground": "#0F172A"},
        "group": {"background": "#131C2E", "border": "#334155", "labelColor": "#94A3B8"},
    }
)

THEMES: dict[str, ThemeConfig] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name_or_config: str | ThemeConfig | None) -> ThemeConfig:
    """Look up a built-in theme by name, or pass a ThemeConfig through.

    Built-in themes are returned as fresh copies, so changing one never
    leaks into later lookups.

    Raises:
        ValueError: If ``name_or_config`` names no built-in theme.
    """
    if name_or_config is None:
        return copy.deepcopy(DEFAULT_THEME)
    if isinstance(name_or_config, ThemeConfig):
        return name_or_config
    theme = THEMES.get(name_or_config)
    if theme is None:
        available = ", ".join(THEMES)
        raise ValueError(f"Unknown theme: '{name_or_config}'. Available: {available}")
    return copy.deepcopy(theme)
