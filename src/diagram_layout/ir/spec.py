"""Spec model for flow diagrams.

These types represent an already-validated diagram description:
nodes, edges, optional groups and an optional explicit grid of group rows.
``from_dict`` accepts the camelCase keys of the YAML/JSON input format.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from diagram_layout.types import Direction, EdgeStyle, NodeShape, NodeVariant


@dataclass
class NodeStyle:
    background_color: str | None = None
    border_color: str | None = None
    text_color: str | None = None
    icon_border_radius: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NodeStyle:
        return cls(
            background_color=data.get("backgroundColor"),
            border_color=data.get("borderColor"),
            text_color=data.get("textColor"),
            icon_border_radius=data.get("iconBorderRadius"),
        )


@dataclass
class GroupStyle:
    background_color: str | None = None
    border_color: str | None = None
    label_color: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GroupStyle:
        return cls(
            background_color=data.get("backgroundColor"),
            border_color=data.get("borderColor"),
            label_color=data.get("labelColor"),
        )


@dataclass
class DiagramNode:
    id: str
    label: str
    shape: NodeShape = field(default_factory=NodeShape.default)
    description: str | None = None
    variant: NodeVariant = field(default_factory=NodeVariant.default)
    icon: str | None = None
    icon_data_uri: str | None = None
    style: NodeStyle | None = None

    @property
    def is_icon_variant(self) -> bool:
        """True when the node renders as an icon-dominant card."""
        return self.variant == NodeVariant.Icon and bool(self.icon_data_uri)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagramNode:
        style = data.get("style")
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", data["id"])),
            shape=NodeShape(data["shape"]) if data.get("shape") else NodeShape.default(),
            description=data.get("description"),
            variant=NodeVariant(data["variant"]) if data.get("variant") else NodeVariant.default(),
            icon=data.get("icon"),
            icon_data_uri=data.get("iconDataUri"),
            style=NodeStyle.from_dict(style) if style else None,
        )


@dataclass
class DiagramEdge:
    from_id: str
    to_id: str
    label: str | None = None
    style: EdgeStyle | None = None
    color: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagramEdge:
        return cls(
            from_id=str(data["from"]),
            to_id=str(data["to"]),
            label=data.get("label"),
            style=EdgeStyle(data["style"]) if data.get("style") else None,
            color=data.get("color"),
        )


@dataclass
class DiagramGroup:
    id: str
    members: list[str]
    label: str | None = None
    direction: Direction | None = None
    style: GroupStyle | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagramGroup:
        style = data.get("style")
        return cls(
            id=str(data["id"]),
            members=[str(m) for m in data.get("members", [])],
            label=data.get("label"),
            direction=Direction(data["direction"]) if data.get("direction") else None,
            style=GroupStyle.from_dict(style) if style else None,
        )


@dataclass
class DiagramSpec:
    nodes: list[DiagramNode]
    edges: list[DiagramEdge] = field(default_factory=list)
    direction: Direction = field(default_factory=Direction.default)
    groups: list[DiagramGroup] = field(default_factory=list)
    rows: list[list[str]] | None = None
    title: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagramSpec:
        """Build a spec from a parsed YAML/JSON mapping.

        Raises:
            ValueError: If an enum-valued field holds an unknown value.
            KeyError: If a node or edge lacks a required key.
        """
        rows = data.get("rows")
        return cls(
            nodes=[DiagramNode.from_dict(n) for n in data.get("nodes", [])],
            edges=[DiagramEdge.from_dict(e) for e in data.get("edges", [])],
            direction=Direction(data["direction"]) if data.get("direction") else Direction.default(),
            groups=[DiagramGroup.from_dict(g) for g in data.get("groups") or []],
            rows=[[str(gid) for gid in row] for row in rows] if rows else None,
            title=data.get("title"),
        )

    def node_map(self) -> dict[str, DiagramNode]:
        return {n.id: n for n in self.nodes}

    def subset(self, member_ids: Iterable[str], direction: Direction) -> DiagramSpec:
        """Mini-spec with only the given nodes and the edges internal to them."""
        by_id = self.node_map()
        members = [by_id[mid] for mid in member_ids if mid in by_id]
        member_set = {n.id for n in members}
        edges = [e for e in self.edges if e.from_id in member_set and e.to_id in member_set]
        return DiagramSpec(nodes=members, edges=edges, direction=direction)
