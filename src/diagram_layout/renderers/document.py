"""JSON document renderer.

Produces the camelCase layout document handed to the drawing collaborator
(SVG, raster, or slide output happens there, not here).
"""

from __future__ import annotations

import json
from typing import Any

from diagram_layout.ir.spec import GroupStyle
from diagram_layout.layout.types import EdgeRoute, GroupLayout, LayoutNode, LayoutResult


def _number(value: float) -> int | float:
    value = float(value)
    return int(value) if value.is_integer() else value


def _node_dict(node: LayoutNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "x": _number(node.x),
        "y": _number(node.y),
        "width": _number(node.width),
        "height": _number(node.height),
    }


def _edge_dict(edge: EdgeRoute) -> dict[str, Any]:
    out: dict[str, Any] = {
        "from": edge.from_id,
        "to": edge.to_id,
        "pathData": edge.path_data,
        "arrowPoints": edge.arrow_points,
    }
    if edge.label_x is not None and edge.label_y is not None:
        out["labelX"] = _number(edge.label_x)
        out["labelY"] = _number(edge.label_y)
    return out


def _style_dict(style: GroupStyle) -> dict[str, str]:
    pairs = (
        ("backgroundColor", style.background_color),
        ("borderColor", style.border_color),
        ("labelColor", style.label_color),
    )
    return {key: value for key, value in pairs if value is not None}


def _group_dict(group: GroupLayout) -> dict[str, Any]:
    out: dict[str, Any] = {"id": group.id}
    if group.label:
        out["label"] = group.label
    out.update(x=_number(group.x), y=_number(group.y), width=_number(group.width), height=_number(group.height))
    if group.style is not None:
        out["style"] = _style_dict(group.style)
    return out


def layout_to_dict(result: LayoutResult) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "width": result.width,
        "height": result.height,
        "nodes": [_node_dict(n) for n in result.nodes.values()],
        "edges": [_edge_dict(e) for e in result.edges],
    }
    if result.groups is not None:
        doc["groups"] = [_group_dict(g) for g in result.groups]
    return doc


class JsonRenderer:
    """Serialise a LayoutResult as a JSON document."""

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def render(self, result: LayoutResult) -> str:
        return json.dumps(layout_to_dict(result), indent=self.indent, ensure_ascii=False) + "\n"
