"""Tests for layout.order — two-sweep barycenter ordering and crossing counts."""

from __future__ import annotations

from diagram_layout.ir.graph import GraphIR
from diagram_layout.ir.spec import DiagramEdge, DiagramNode, DiagramSpec
from diagram_layout.layout.order import count_crossings, order_nodes
from diagram_layout.layout.rank import RankAssignment


def make_spec(ids: str, *edges: tuple[str, str]) -> DiagramSpec:
    return DiagramSpec(
        nodes=[DiagramNode(id=i, label=i) for i in ids],
        edges=[DiagramEdge(src, tgt) for src, tgt in edges],
    )


def ordered(spec: DiagramSpec) -> list[list[str]]:
    ra = RankAssignment.assign(spec)
    return order_nodes(spec, ra.ranks, ra.back_edges)


class TestOrderNodes:
    def test_groups_by_rank(self):
        assert ordered(make_spec("AB", ("A", "B"))) == [["A"], ["B"]]

    def test_initial_order_is_input_order(self):
        """Unconnected nodes on one rank keep their input order."""
        assert ordered(make_spec("CBA")) == [["C", "B", "A"]]

    def test_diamond_keeps_children_apart(self):
        layers = ordered(make_spec("ABCD", ("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")))
        assert layers == [["A"], ["B", "C"], ["D"]]

    def test_downward_sweep_uncrosses(self):
        """A → D and B → C start crossed; the downward sweep swaps C and D."""
        spec = make_spec("ABCD", ("A", "D"), ("B", "C"))
        layers = ordered(spec)
        assert layers == [["A", "B"], ["D", "C"]]
        assert count_crossings(layers, GraphIR.from_spec(spec)) == 0

    def test_nodes_without_neighbours_score_zero(self):
        """Z has no outgoing edge, scores 0 in the upward sweep and moves ahead of B."""
        spec = make_spec("ABZCD", ("A", "C"), ("B", "D"))
        layers = ordered(spec)
        assert layers == [["A", "Z", "B"], ["C", "D"]]

    def test_back_edges_ignored(self):
        """The back-edge C → A must not pull A toward C's position."""
        spec = make_spec("ABC", ("A", "B"), ("B", "C"), ("C", "A"))
        ra = RankAssignment.assign(spec)
        assert order_nodes(spec, ra.ranks, ra.back_edges) == [["A"], ["B"], ["C"]]

    def test_every_node_placed_once(self):
        spec = make_spec("ABCDEF", ("A", "C"), ("B", "C"), ("C", "D"), ("C", "E"), ("F", "E"), ("E", "A"))
        layers = ordered(spec)
        flat = [nid for layer in layers for nid in layer]
        assert sorted(flat) == sorted("ABCDEF")

    def test_deterministic(self):
        spec = make_spec("ABCDEF", ("A", "D"), ("B", "F"), ("C", "E"), ("A", "F"), ("C", "D"))
        assert ordered(spec) == ordered(spec)


class TestCountCrossings:
    def test_no_crossings(self):
        spec = make_spec("ABCD", ("A", "C"), ("B", "D"))
        assert count_crossings([["A", "B"], ["C", "D"]], GraphIR.from_spec(spec)) == 0

    def test_one_crossing(self):
        spec = make_spec("ABCD", ("A", "D"), ("B", "C"))
        assert count_crossings([["A", "B"], ["C", "D"]], GraphIR.from_spec(spec)) == 1

    def test_single_layer(self):
        spec = make_spec("AB")
        assert count_crossings([["A", "B"]], GraphIR.from_spec(spec)) == 0
