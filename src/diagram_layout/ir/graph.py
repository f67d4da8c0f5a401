"""Graph IR — wraps a DiagramSpec in a networkx MultiDiGraph for layout.

Nodes keep the spec's input order. Every edge is keyed by its index in
``spec.edges`` so parallel edges survive and later phases can refer back
to individual edges (back-edge classification works on indices).
"""

from __future__ import annotations

from collections.abc import Collection

import networkx as nx

from diagram_layout.ir.spec import DiagramSpec
from diagram_layout.types import Direction


class GraphIR:
    """Adjacency view of a spec's nodes and (optionally filtered) edges.

    Neighbour queries return results in edge-index order, with one entry
    per edge, so parallel edges are counted as many times as they occur.
    """

    def __init__(self, digraph: nx.MultiDiGraph, direction: Direction) -> None:
        self.digraph = digraph
        self.direction = direction

    @classmethod
    def from_spec(cls, spec: DiagramSpec, exclude: Collection[int] = ()) -> GraphIR:
        """Build a GraphIR, leaving out the edges whose indices are in ``exclude``."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in spec.nodes:
            digraph.add_node(node.id, data=node)
        for idx, edge in enumerate(spec.edges):
            if idx in exclude:
                continue
            if edge.from_id not in digraph or edge.to_id not in digraph:
                continue
            digraph.add_edge(edge.from_id, edge.to_id, key=idx, data=edge)
        return cls(digraph=digraph, direction=spec.direction)

    def node_ids(self) -> list[str]:
        return list(self.digraph.nodes)

    def out_edges(self, node_id: str) -> list[tuple[str, int]]:
        """Outgoing ``(target, edge_index)`` pairs in edge-index order."""
        if node_id not in self.digraph:
            return []
        pairs = [(tgt, key) for _, tgt, key in self.digraph.out_edges(node_id, keys=True)]
        pairs.sort(key=lambda p: p[1])
        return pairs

    def successors(self, node_id: str) -> list[str]:
        return [tgt for tgt, _ in self.out_edges(node_id)]

    def predecessors(self, node_id: str) -> list[str]:
        if node_id not in self.digraph:
            return []
        pairs = [(src, key) for src, _, key in self.digraph.in_edges(node_id, keys=True)]
        pairs.sort(key=lambda p: p[1])
        return [src for src, _ in pairs]

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)
