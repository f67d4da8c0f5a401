"""Edge routing: SVG path data and arrowhead polygons between node ports.

Two routers share the same geometry helpers:

* ``route_edges`` picks ports from the diagram direction (flat layouts).
* ``route_edges_global`` picks ports per edge from the dominant axis between
  the two node centres (grouped layouts, where groups may flow differently).
"""

from __future__ import annotations

import logging
import math

from diagram_layout.config import ThemeConfig
from diagram_layout.ir.spec import DiagramEdge, DiagramSpec
from diagram_layout.layout.types import STRAIGHT_TOLERANCE, EdgeRoute, LayoutNode
from diagram_layout.types import Direction

logger = logging.getLogger(__name__)


def fmt_number(value: float) -> str:
    """Format a coordinate the way it appears in SVG path data (``40``, ``62.5``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def compute_arrowhead(base_x: float, base_y: float, tip_x: float, tip_y: float, size: float) -> str:
    """SVG polygon points for a triangle pointing from base toward tip.

    Returns an empty string when base and tip coincide.
    """
    dx = tip_x - base_x
    dy = tip_y - base_y
    length = math.hypot(dx, dy)
    if length == 0:
        return ""

    ux = dx / length
    uy = dy / length
    px = -uy
    py = ux
    half_width = size * 0.5

    x1 = tip_x - ux * size + px * half_width
    y1 = tip_y - uy * size + py * half_width
    x2 = tip_x - ux * size - px * half_width
    y2 = tip_y - uy * size - py * half_width

    return " ".join(f"{fmt_number(x)},{fmt_number(y)}" for x, y in ((tip_x, tip_y), (x1, y1), (x2, y2)))


def _shorten(start_x: float, start_y: float, end_x: float, end_y: float, amount: float) -> tuple[float, float]:
    dx = end_x - start_x
    dy = end_y - start_y
    length = math.hypot(dx, dy)
    if length == 0:
        return end_x, end_y
    return end_x - dx / length * amount, end_y - dy / length * amount


def _build_path(
    start_x: float,
    start_y: float,
    end_x: float,
    end_y: float,
    vertical: bool,
    straight_ref: tuple[float, float],
) -> str:
    """Straight segment when the ports line up, otherwise an S-shaped cubic bezier.

    ``straight_ref`` is the point whose cross-axis offset from the start
    decides between the two. ``vertical`` puts both control points on the
    horizontal midline (ports on top/bottom); otherwise they sit on the
    vertical midline (ports left/right).
    """
    sx, sy, ex, ey = (fmt_number(v) for v in (start_x, start_y, end_x, end_y))
    ref_x, ref_y = straight_ref
    if vertical:
        if abs(start_x - ref_x) < STRAIGHT_TOLERANCE:
            return f"M {sx} {sy} L {ex} {ey}"
        mid = fmt_number((start_y + end_y) / 2)
        return f"M {sx} {sy} C {sx} {mid}, {ex} {mid}, {ex} {ey}"
    if abs(start_y - ref_y) < STRAIGHT_TOLERANCE:
        return f"M {sx} {sy} L {ex} {ey}"
    mid = fmt_number((start_x + end_x) / 2)
    return f"M {sx} {sy} C {mid} {sy}, {mid} {ey}, {ex} {ey}"


def _make_route(
    edge: DiagramEdge,
    ports: tuple[float, float, float, float],
    vertical: bool,
    arrow_size: float,
    straight_from_tip_base: bool,
) -> EdgeRoute:
    """Build one route between two ports.

    The straight-line test measures the start port's offset to the arrow tip,
    or to the arrowhead base when ``straight_from_tip_base`` is set.
    """
    start_x, start_y, end_x, end_y = ports
    tip_base_x, tip_base_y = _shorten(start_x, start_y, end_x, end_y, arrow_size)
    straight_ref = (tip_base_x, tip_base_y) if straight_from_tip_base else (end_x, end_y)
    has_label = bool(edge.label)
    return EdgeRoute(
        from_id=edge.from_id,
        to_id=edge.to_id,
        path_data=_build_path(start_x, start_y, tip_base_x, tip_base_y, vertical, straight_ref),
        arrow_points=compute_arrowhead(tip_base_x, tip_base_y, end_x, end_y, arrow_size),
        label_x=(start_x + end_x) / 2 if has_label else None,
        label_y=(start_y + end_y) / 2 if has_label else None,
    )


def _endpoints(edge: DiagramEdge, positions: dict[str, LayoutNode]) -> tuple[LayoutNode, LayoutNode] | None:
    src = positions.get(edge.from_id)
    tgt = positions.get(edge.to_id)
    if src is None or tgt is None:
        logger.warning("skipping edge %s -> %s: endpoint has no position", edge.from_id, edge.to_id)
        return None
    return src, tgt


# ─── Direction-based routing ─────────────────────────────────────────────────


def direction_ports(src: LayoutNode, tgt: LayoutNode, direction: Direction) -> tuple[float, float, float, float]:
    """TB: bottom-centre to top-centre. LR: right-centre to left-centre."""
    if direction == Direction.LR:
        return src.x + src.width, src.center_y, tgt.x, tgt.center_y
    return src.center_x, src.y + src.height, tgt.center_x, tgt.y


def route_edges(spec: DiagramSpec, positions: dict[str, LayoutNode], theme: ThemeConfig) -> list[EdgeRoute]:
    """Route every edge with ports fixed by the diagram direction."""
    vertical = spec.direction != Direction.LR
    routes: list[EdgeRoute] = []
    for edge in spec.edges:
        pair = _endpoints(edge, positions)
        if pair is None:
            continue
        ports = direction_ports(pair[0], pair[1], spec.direction)
        routes.append(_make_route(edge, ports, vertical, theme.edge.arrow_size, straight_from_tip_base=False))
    return routes


# ─── Position-based routing ──────────────────────────────────────────────────


def dominant_axis_ports(src: LayoutNode, tgt: LayoutNode) -> tuple[tuple[float, float, float, float], bool]:
    """Pick facing ports along whichever axis separates the centres more.

    Returns the ports and whether they are on the vertical (top/bottom) sides.
    Ties go to the vertical axis.
    """
    dx = tgt.center_x - src.center_x
    dy = tgt.center_y - src.center_y

    if abs(dx) > abs(dy):
        if dx > 0:
            return (src.x + src.width, src.center_y, tgt.x, tgt.center_y), False
        return (src.x, src.center_y, tgt.x + tgt.width, tgt.center_y), False
    if dy > 0:
        return (src.center_x, src.y + src.height, tgt.center_x, tgt.y), True
    return (src.center_x, src.y, tgt.center_x, tgt.y + tgt.height), True


def route_edges_global(spec: DiagramSpec, positions: dict[str, LayoutNode], theme: ThemeConfig) -> list[EdgeRoute]:
    """Route every edge choosing ports from node positions, not the diagram direction."""
    routes: list[EdgeRoute] = []
    for edge in spec.edges:
        pair = _endpoints(edge, positions)
        if pair is None:
            continue
        ports, vertical = dominant_axis_ports(pair[0], pair[1])
        routes.append(_make_route(edge, ports, vertical, theme.edge.arrow_size, straight_from_tip_base=True))
    return routes
