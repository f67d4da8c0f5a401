"""Flat layout pipeline: rank → order → position → route."""

from __future__ import annotations

import logging
import math

from diagram_layout.config import DEFAULT_PADDING, ThemeConfig
from diagram_layout.ir.graph import GraphIR
from diagram_layout.ir.spec import DiagramSpec
from diagram_layout.layout.edges import route_edges
from diagram_layout.layout.order import count_crossings, order_nodes
from diagram_layout.layout.position import canvas_extent, position_nodes
from diagram_layout.layout.rank import RankAssignment
from diagram_layout.layout.types import LayoutResult

logger = logging.getLogger(__name__)


def layout(spec: DiagramSpec, theme: ThemeConfig, padding: float = DEFAULT_PADDING) -> LayoutResult:
    """Lay out an ungrouped flow diagram.

    Back-edges are kept out of ranking and ordering but are still routed,
    so cycles draw as edges running against the flow.
    """
    ra = RankAssignment.assign(spec)
    layers = order_nodes(spec, ra.ranks, ra.back_edges)
    if logger.isEnabledFor(logging.DEBUG):
        forward = GraphIR.from_spec(spec, exclude=ra.back_edges)
        logger.debug("ordering leaves %d crossings", count_crossings(layers, forward))

    positions = position_nodes(spec, layers, theme, padding)
    edges = route_edges(spec, positions, theme)

    max_x, max_y = canvas_extent(positions.values())
    return LayoutResult(
        nodes=positions,
        edges=edges,
        width=math.ceil(max_x + padding),
        height=math.ceil(max_y + padding),
    )
