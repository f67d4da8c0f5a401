"""Layout types shared across layout phases and renderers."""

from __future__ import annotations

from dataclasses import dataclass

from diagram_layout.ir.spec import GroupStyle


@dataclass
class LayoutNode:
    """A positioned node in pixel coordinates (top-left corner + size)."""

    id: str
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def shifted(self, dx: float, dy: float) -> LayoutNode:
        return LayoutNode(id=self.id, x=self.x + dx, y=self.y + dy, width=self.width, height=self.height)


@dataclass
class EdgeRoute:
    """A routed edge: SVG path data plus an arrowhead polygon."""

    from_id: str
    to_id: str
    path_data: str
    arrow_points: str
    label_x: float | None = None
    label_y: float | None = None


@dataclass
class GroupLayout:
    """Bounding box of a rendered group."""

    id: str
    x: float
    y: float
    width: float
    height: float
    label: str | None = None
    style: GroupStyle | None = None


@dataclass
class LayoutResult:
    """Self-contained layout output: everything renderers need."""

    nodes: dict[str, LayoutNode]
    edges: list[EdgeRoute]
    width: int
    height: int
    groups: list[GroupLayout] | None = None


@dataclass
class Size:
    width: float
    height: float



# Id of the implicit group holding nodes that belong to no declared group.
UNGROUPED_ID = "__ungrouped__"

# Edge ports closer than this (px) on the cross axis are joined by a straight line.
STRAIGHT_TOLERANCE: float = 1.0
