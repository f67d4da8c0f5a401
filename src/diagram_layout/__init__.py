"""diagram-layout: declarative flow diagram specs to positioned layouts."""

from typing import Any

from diagram_layout.config import DEFAULT_PADDING, ThemeConfig, get_theme
from diagram_layout.icons import IconResolver, inline_data_resolver, resolve_icons
from diagram_layout.ir.spec import DiagramEdge, DiagramGroup, DiagramNode, DiagramSpec
from diagram_layout.layout import full_layout
from diagram_layout.layout.types import LayoutResult
from diagram_layout.renderers.document import layout_to_dict
from diagram_layout.types import Direction, EdgeStyle, NodeShape, NodeVariant

__all__ = [
    "DEFAULT_PADDING",
    "DiagramEdge",
    "DiagramGroup",
    "DiagramNode",
    "DiagramSpec",
    "Direction",
    "EdgeStyle",
    "LayoutResult",
    "NodeShape",
    "NodeVariant",
    "ThemeConfig",
    "layout_diagram",
    "full_layout",
    "get_theme",
    "layout_dict",
    "layout_to_dict",
    "resolve_icons",
]


async def layout_diagram(
    spec: DiagramSpec,
    theme: str | ThemeConfig | None = None,
    padding: float = DEFAULT_PADDING,
    resolver: IconResolver = inline_data_resolver,
) -> LayoutResult:
    """Resolve every node icon concurrently, then lay the diagram out.

    Args:
        spec: Validated diagram spec. Resolved icon data is written into its nodes.
        theme: Built-in theme name, explicit ThemeConfig, or None for the default.
        padding: Outer canvas padding in pixels.
        resolver: Coroutine function mapping an icon reference to image data.

    Returns:
        The computed LayoutResult.

    Raises:
        ValueError: If the theme name is unknown.
    """
    theme_config = get_theme(theme)
    await resolve_icons(spec, resolver)
    return full_layout(spec, theme_config, padding)


def layout_dict(data: dict[str, Any], theme: str | ThemeConfig | None = None, padding: float = DEFAULT_PADDING) -> dict[str, Any]:
    """Lay out a spec given as a parsed YAML/JSON mapping and return the layout document.

    Icons must already be resolved (``iconDataUri``) in ``data``.

    Raises:
        ValueError: If an enum-valued field is unknown or the theme name is unknown.
    """
    spec = DiagramSpec.from_dict(data)
    return layout_to_dict(full_layout(spec, theme, padding))
