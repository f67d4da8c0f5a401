"""Two-level layout: lay out each group on its own, then arrange groups on a grid.

Nodes outside every declared group go into a synthetic ``__ungrouped__``
group that flows in the diagram direction and is not drawn as a box.
After grid placement all edges, including those between groups, are
re-routed on the combined positions with dominant-axis port selection.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from diagram_layout.config import DEFAULT_PADDING, GroupTheme, ThemeConfig
from diagram_layout.ir.spec import DiagramGroup, DiagramSpec
from diagram_layout.layout.edges import route_edges_global
from diagram_layout.layout.engine import layout
from diagram_layout.layout.position import canvas_extent
from diagram_layout.layout.types import UNGROUPED_ID, GroupLayout, LayoutNode, LayoutResult, Size
from diagram_layout.types import Direction

logger = logging.getLogger(__name__)


@dataclass
class GroupPlacement:
    """A group's inner layout, outer box size, and grid origin."""

    group: DiagramGroup
    inner: LayoutResult
    label_height: float
    size: Size
    x: float = 0.0
    y: float = 0.0


def partition_groups(spec: DiagramSpec) -> list[DiagramGroup]:
    """Declared groups plus a synthetic group for any node they leave out."""
    grouped: set[str] = set()
    for group in spec.groups:
        grouped.update(group.members)
    ungrouped = [n.id for n in spec.nodes if n.id not in grouped]

    groups = list(spec.groups)
    if ungrouped:
        groups.append(DiagramGroup(id=UNGROUPED_ID, members=ungrouped, direction=spec.direction))
    return groups


def _label_height(group: DiagramGroup, metrics: GroupTheme) -> float:
    if not group.label:
        return 0
    return metrics.label_font_size + metrics.label_margin_bottom


def measure_group(group: DiagramGroup, spec: DiagramSpec, theme: ThemeConfig) -> GroupPlacement:
    """Lay out a group's members with zero padding and size its outer box."""
    sub_spec = spec.subset(group.members, group.direction or spec.direction)
    inner = layout(sub_spec, theme, padding=0)
    metrics = theme.group
    label_height = _label_height(group, metrics)
    size = Size(
        width=inner.width + metrics.padding_x * 2,
        height=inner.height + metrics.padding_y * 2 + label_height,
    )
    return GroupPlacement(group=group, inner=inner, label_height=label_height, size=size)


def build_grid(spec: DiagramSpec, groups: list[DiagramGroup]) -> list[list[str]]:
    """Rows of group ids, from ``spec.rows`` or the direction default.

    Explicit rows keep only known group ids; groups they omit are appended
    as one extra row. Without rows, LR puts every group in a single row and
    TB stacks one group per row.
    """
    known = [g.id for g in groups]
    if spec.rows:
        known_set = set(known)
        rows = [[gid for gid in row if gid in known_set] for row in spec.rows]
        rows = [row for row in rows if row]
        mentioned = {gid for row in rows for gid in row}
        missing = [gid for gid in known if gid not in mentioned]
        if missing:
            rows.append(missing)
        return rows

    if spec.direction == Direction.LR:
        return [known]
    return [[gid] for gid in known]


def place_grid(grid: list[list[str]], placements: dict[str, GroupPlacement], gap: float, padding: float) -> None:
    """Set each placement's absolute origin.

    Rows stack downward ``gap`` apart and are centred against the widest row;
    groups inside a row sit ``gap`` apart, vertically centred in the row.
    """
    row_heights: list[float] = []
    row_widths: list[float] = []
    for row in grid:
        sizes = [placements[gid].size for gid in row]
        row_heights.append(max((s.height for s in sizes), default=0))
        row_widths.append(sum(s.width for s in sizes) + (len(row) - 1) * gap)

    max_row_width = max(row_widths, default=0)
    y = padding
    for row, row_height, row_width in zip(grid, row_heights, row_widths):
        x = padding + (max_row_width - row_width) / 2
        for gid in row:
            placement = placements[gid]
            placement.x = x
            placement.y = y + (row_height - placement.size.height) / 2
            x += placement.size.width + gap
        y += row_height + gap


def layout_with_groups(spec: DiagramSpec, theme: ThemeConfig, padding: float = DEFAULT_PADDING) -> LayoutResult:
    """Lay out a diagram whose nodes may be organised into groups.

    Falls back to the flat ``layout`` when the spec declares no groups.
    """
    if not spec.groups:
        return layout(spec, theme, padding)

    metrics = theme.group
    groups = partition_groups(spec)
    placements = {g.id: measure_group(g, spec, theme) for g in groups}
    grid = build_grid(spec, groups)
    place_grid(grid, placements, metrics.gap, padding)
    logger.debug("placed %d groups on a %d-row grid", len(placements), len(grid))

    positions: dict[str, LayoutNode] = {}
    group_boxes: list[GroupLayout] = []
    for group in groups:
        placement = placements[group.id]
        offset_x = placement.x + metrics.padding_x
        offset_y = placement.y + metrics.padding_y + placement.label_height
        for node_id, node in placement.inner.nodes.items():
            positions[node_id] = node.shifted(offset_x, offset_y)

        if group.id != UNGROUPED_ID:
            group_boxes.append(
                GroupLayout(
                    id=group.id,
                    x=placement.x,
                    y=placement.y,
                    width=placement.size.width,
                    height=placement.size.height,
                    label=group.label,
                    style=group.style,
                )
            )

    edges = route_edges_global(spec, positions, theme)

    max_x, max_y = canvas_extent([*positions.values(), *group_boxes])
    return LayoutResult(
        nodes=positions,
        edges=edges,
        width=math.ceil(max_x + padding),
        height=math.ceil(max_y + padding),
        groups=group_boxes,
    )
