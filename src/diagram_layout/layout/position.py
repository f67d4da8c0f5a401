"""Node size estimation and coordinate assignment."""

from __future__ import annotations

import math
from collections.abc import Iterable

from diagram_layout.config import ThemeConfig
from diagram_layout.ir.spec import DiagramNode, DiagramSpec
from diagram_layout.layout.types import GroupLayout, LayoutNode, Size
from diagram_layout.types import Direction, NodeShape

# Average glyph advance as a fraction of the font size.
CHAR_WIDTH_RATIO: float = 0.58
# Diamonds are drawn as a rotated square and need room for the inscribed label.
DIAMOND_SCALE: float = 1.2
DESCRIPTION_LINE_GAP: float = 4
ICON_PADDING_X: float = 12
ICON_PADDING_Y: float = 10


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ─── Size Estimation ─────────────────────────────────────────────────────────


def measure_node(node: DiagramNode, theme: ThemeConfig) -> Size:
    """Estimate a node's rendered size from its label, icon, description and shape."""
    metrics = theme.node
    icon_variant = node.is_icon_variant

    font_size = metrics.icon.dominant_label_font_size if icon_variant else metrics.font_size
    padding_x = ICON_PADDING_X if icon_variant else metrics.padding_x
    padding_y = ICON_PADDING_Y if icon_variant else metrics.padding_y

    width = len(node.label) * font_size * CHAR_WIDTH_RATIO + padding_x * 2
    if icon_variant:
        width = max(width, metrics.icon.dominant_size + padding_x * 2)
    width = max(width, metrics.min_width)
    width = min(width, metrics.max_width)

    height = padding_y * 2 + font_size
    if node.icon_data_uri:
        if icon_variant:
            height += metrics.icon.dominant_size + metrics.icon.dominant_margin_bottom
        else:
            height += metrics.icon.size + metrics.icon.margin_bottom
    if node.description:
        height += metrics.description_font_size + DESCRIPTION_LINE_GAP

    if node.shape == NodeShape.Diamond:
        width = max(width, height) * DIAMOND_SCALE
        height = width
    elif node.shape == NodeShape.Circle:
        side = max(width, height)
        width = side
        height = side

    return Size(width=_round_half_up(width), height=_round_half_up(height))


# ─── Coordinate Assignment ───────────────────────────────────────────────────


def _span(sizes: list[Size], attr: str, sep: float) -> float:
    if not sizes:
        return 0.0
    return sum(getattr(s, attr) for s in sizes) + (len(sizes) - 1) * sep


def position_nodes(
    spec: DiagramSpec,
    layers: list[list[str]],
    theme: ThemeConfig,
    padding: float,
) -> dict[str, LayoutNode]:
    """Assign pixel positions to every node.

    TB: each rank is a row, rows stacked downward ``rank_sep`` apart, nodes
    within a row ``node_sep`` apart. LR is the transpose: ranks are columns.
    Each rank is then centred against the widest (TB) or tallest (LR) one,
    and each node is centred on the cross axis inside its rank's band.
    """
    sizes: dict[str, Size] = {n.id: measure_node(n, theme) for n in spec.nodes}
    rank_sep = theme.spacing.rank_sep
    node_sep = theme.spacing.node_sep
    is_lr = spec.direction == Direction.LR

    # Along-rank axis: x for TB, y for LR. Cross axis is the other one.
    along = "height" if is_lr else "width"
    across = "width" if is_lr else "height"

    layer_sizes = [[sizes[nid] for nid in layer] for layer in layers]
    spans = [_span(ls, along, node_sep) for ls in layer_sizes]
    max_span = max(spans, default=0.0)

    positions: dict[str, LayoutNode] = {}
    cross = padding
    for layer, ls, span in zip(layers, layer_sizes, spans):
        band = max((getattr(s, across) for s in ls), default=0.0)
        cursor = padding + (max_span - span) / 2
        for node_id, size in zip(layer, ls):
            offset = cross + (band - getattr(size, across)) / 2
            if is_lr:
                x, y = offset, cursor
            else:
                x, y = cursor, offset
            positions[node_id] = LayoutNode(id=node_id, x=x, y=y, width=size.width, height=size.height)
            cursor += getattr(size, along) + node_sep
        cross += band + rank_sep

    return positions


def canvas_extent(boxes: Iterable[LayoutNode | GroupLayout]) -> tuple[float, float]:
    """Right-most and bottom-most edge over a set of boxes."""
    max_x = 0.0
    max_y = 0.0
    for n in boxes:
        max_x = max(max_x, n.x + n.width)
        max_y = max(max_y, n.y + n.height)
    return max_x, max_y
