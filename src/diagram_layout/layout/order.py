"""Crossing minimization: two-sweep barycenter ordering within ranks."""

from __future__ import annotations

from collections.abc import Collection

from diagram_layout.ir.graph import GraphIR
from diagram_layout.ir.spec import DiagramSpec


def _barycenter(neighbors: list[str], index: dict[str, int]) -> float:
    positions = [index[nb] for nb in neighbors if nb in index]
    if not positions:
        return 0.0
    return sum(positions) / len(positions)


def order_nodes(spec: DiagramSpec, ranks: dict[str, int], back_edges: Collection[int] = ()) -> list[list[str]]:
    """Order nodes within each rank to reduce edge crossings.

    Runs exactly one downward sweep (each rank sorted by the mean index of
    its incoming neighbours in the rank above) followed by one upward sweep
    (outgoing neighbours in the rank below). Back-edges are ignored. Nodes
    without neighbours in the reference rank score 0; ``list.sort`` is
    stable, so ties keep their previous relative order.
    """
    rank_count = (max(ranks.values()) + 1) if ranks else 0
    layers: list[list[str]] = [[] for _ in range(rank_count)]
    for node in spec.nodes:
        if node.id in ranks:
            layers[ranks[node.id]].append(node.id)

    forward = GraphIR.from_spec(spec, exclude=back_edges)
    incoming = {nid: forward.predecessors(nid) for nid in forward.node_ids()}
    outgoing = {nid: forward.successors(nid) for nid in forward.node_ids()}

    for r in range(1, rank_count):
        prev: dict[str, int] = {nid: i for i, nid in enumerate(layers[r - 1])}
        layers[r].sort(key=lambda nid, p=prev: _barycenter(incoming.get(nid, []), p))

    for r in range(rank_count - 2, -1, -1):
        nxt: dict[str, int] = {nid: i for i, nid in enumerate(layers[r + 1])}
        layers[r].sort(key=lambda nid, n=nxt: _barycenter(outgoing.get(nid, []), n))

    return layers


def count_crossings(layers: list[list[str]], graph: GraphIR) -> int:
    """Count pairwise crossings of edges between adjacent ranks."""
    total = 0
    for r in range(len(layers) - 1):
        tgt_pos: dict[str, int] = {nid: i for i, nid in enumerate(layers[r + 1])}
        segments: list[tuple[int, int]] = []
        for sp, src_id in enumerate(layers[r]):
            for nb in graph.successors(src_id):
                if nb in tgt_pos:
                    segments.append((sp, tgt_pos[nb]))
        for i in range(len(segments)):
            for j in range(i + 1, len(segments)):
                a, b = segments[i], segments[j]
                if (a[0] < b[0] and a[1] > b[1]) or (a[0] > b[0] and a[1] < b[1]):
                    total += 1
    return total
