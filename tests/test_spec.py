"""Tests for diagram_layout.ir.spec — building specs from mappings and group sub-specs."""

import pytest

from diagram_layout.ir.spec import DiagramEdge, DiagramNode, DiagramSpec
from diagram_layout.types import Direction, EdgeStyle, NodeShape, NodeVariant


def _sample() -> dict:
    return {
        "direction": "LR",
        "nodes": [
            {"id": "api", "label": "API", "shape": "rounded", "description": "public edge"},
            {"id": "db", "label": "Database", "shape": "circle", "variant": "icon", "icon": "aws:rds"},
            {"id": "cache", "label": "Cache", "iconDataUri": "data:image/png;base64,AA==", "style": {"borderColor": "#f00"}},
        ],
        "edges": [
            {"from": "api", "to": "db", "label": "SQL", "style": "dashed", "color": "#333"},
            {"from": "api", "to": "cache"},
        ],
        "groups": [
            {"id": "backend", "label": "Backend", "members": ["db", "cache"], "direction": "TB",
             "style": {"backgroundColor": "#eee"}},
        ],
        "rows": [["backend"]],
    }


class TestFromDict:
    def test_direction(self):
        spec = DiagramSpec.from_dict(_sample())
        assert spec.direction == Direction.LR

    def test_direction_defaults_to_tb(self):
        spec = DiagramSpec.from_dict({"nodes": [{"id": "a", "label": "A"}]})
        assert spec.direction == Direction.TB
        assert spec.edges == []
        assert spec.groups == []
        assert spec.rows is None

    def test_nodes(self):
        spec = DiagramSpec.from_dict(_sample())
        assert [n.id for n in spec.nodes] == ["api", "db", "cache"]
        api, db, cache = spec.nodes
        assert api.shape == NodeShape.Rounded
        assert api.description == "public edge"
        assert db.variant == NodeVariant.Icon
        assert db.icon == "aws:rds"
        assert db.icon_data_uri is None
        assert cache.icon_data_uri == "data:image/png;base64,AA=="
        assert cache.style is not None and cache.style.border_color == "#f00"

    def test_node_defaults(self):
        spec = DiagramSpec.from_dict({"nodes": [{"id": "a", "label": "A"}]})
        n = spec.nodes[0]
        assert n.shape == NodeShape.Rectangle
        assert n.variant == NodeVariant.Default
        assert n.style is None

    def test_edges(self):
        spec = DiagramSpec.from_dict(_sample())
        first, second = spec.edges
        assert (first.from_id, first.to_id) == ("api", "db")
        assert first.label == "SQL"
        assert first.style == EdgeStyle.Dashed
        assert first.color == "#333"
        assert second.label is None
        assert second.style is None

    def test_groups_and_rows(self):
        spec = DiagramSpec.from_dict(_sample())
        group = spec.groups[0]
        assert group.id == "backend"
        assert group.members == ["db", "cache"]
        assert group.direction == Direction.TB
        assert group.style is not None and group.style.background_color == "#eee"
        assert spec.rows == [["backend"]]

    def test_unknown_direction_raises(self):
        with pytest.raises(ValueError):
            DiagramSpec.from_dict({"direction": "RL", "nodes": [{"id": "a", "label": "A"}]})

    def test_unknown_shape_raises(self):
        with pytest.raises(ValueError):
            DiagramSpec.from_dict({"nodes": [{"id": "a", "label": "A", "shape": "hexagon"}]})

    def test_missing_edge_endpoint_key_raises(self):
        with pytest.raises(KeyError):
            DiagramSpec.from_dict({"nodes": [{"id": "a", "label": "A"}], "edges": [{"from": "a"}]})


class TestIconVariant:
    def test_icon_variant_needs_resolved_data(self):
        n = DiagramNode(id="a", label="A", variant=NodeVariant.Icon, icon="aws:s3")
        assert not n.is_icon_variant
        n.icon_data_uri = "data:image/svg+xml;base64,AA=="
        assert n.is_icon_variant

    def test_default_variant_with_icon_is_not_icon_variant(self):
        n = DiagramNode(id="a", label="A", icon_data_uri="data:x")
        assert not n.is_icon_variant


class TestSubset:
    def _spec(self) -> DiagramSpec:
        return DiagramSpec(
            nodes=[DiagramNode(id=i, label=i) for i in "ABCD"],
            edges=[
                DiagramEdge("A", "B"),
                DiagramEdge("B", "C"),
                DiagramEdge("C", "D"),
                DiagramEdge("D", "C"),
            ],
        )

    def test_keeps_member_order(self):
        sub = self._spec().subset(["C", "A", "B"], Direction.LR)
        assert [n.id for n in sub.nodes] == ["C", "A", "B"]
        assert sub.direction == Direction.LR

    def test_keeps_only_internal_edges(self):
        sub = self._spec().subset(["C", "D"], Direction.TB)
        assert [(e.from_id, e.to_id) for e in sub.edges] == [("C", "D"), ("D", "C")]

    def test_has_no_groups(self):
        sub = self._spec().subset(["A"], Direction.TB)
        assert sub.groups == []
        assert sub.rows is None
        assert sub.edges == []
