"""Layout engine public API."""

from __future__ import annotations

from diagram_layout.config import DEFAULT_PADDING, ThemeConfig, get_theme
from diagram_layout.ir.spec import DiagramSpec
from diagram_layout.layout.edges import compute_arrowhead, route_edges, route_edges_global
from diagram_layout.layout.engine import layout
from diagram_layout.layout.groups import build_grid, layout_with_groups, partition_groups
from diagram_layout.layout.order import count_crossings, order_nodes
from diagram_layout.layout.position import measure_node, position_nodes
from diagram_layout.layout.rank import RankAssignment, find_back_edges
from diagram_layout.layout.types import UNGROUPED_ID, EdgeRoute, GroupLayout, LayoutNode, LayoutResult, Size

__all__ = [
    "UNGROUPED_ID",
    "EdgeRoute",
    "GroupLayout",
    "LayoutNode",
    "LayoutResult",
    "RankAssignment",
    "Size",
    "build_grid",
    "compute_arrowhead",
    "count_crossings",
    "find_back_edges",
    "full_layout",
    "layout",
    "layout_with_groups",
    "measure_node",
    "order_nodes",
    "partition_groups",
    "position_nodes",
    "route_edges",
    "route_edges_global",
]


def full_layout(
    spec: DiagramSpec,
    theme: str | ThemeConfig | None = None,
    padding: float = DEFAULT_PADDING,
) -> LayoutResult:
    """Run the layout pipeline, grouped or flat, with a named or explicit theme."""
    return layout_with_groups(spec, get_theme(theme), padding)
