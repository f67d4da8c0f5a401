"""Rank assignment: back-edge classification and longest-path layering."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from diagram_layout.ir.graph import GraphIR
from diagram_layout.ir.spec import DiagramSpec

logger = logging.getLogger(__name__)


# ─── Back-Edge Detection (DFS) ───────────────────────────────────────────────


def find_back_edges(graph: GraphIR) -> set[int]:
    """Return indices of edges whose target is on the DFS stack when explored.

    Roots are taken in node input order and out-edges in edge-index order,
    so the result is deterministic for a given spec. Uses an explicit stack
    so deep chains cannot exhaust the interpreter's recursion limit.
    """
    back_edges: set[int] = set()
    visited: set[str] = set()
    on_stack: set[str] = set()

    for root in graph.node_ids():
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack: list[tuple[str, Iterator[tuple[str, int]]]] = [(root, iter(graph.out_edges(root)))]

        while stack:
            node_id, pending = stack[-1]
            step = next(pending, None)
            if step is None:
                stack.pop()
                on_stack.discard(node_id)
                continue
            target, idx = step
            if target in on_stack:
                back_edges.add(idx)
            elif target not in visited:
                visited.add(target)
                on_stack.add(target)
                stack.append((target, iter(graph.out_edges(target))))

    return back_edges


# ─── Layer Assignment (longest path) ─────────────────────────────────────────


def longest_path_ranks(forward: GraphIR) -> dict[str, int]:
    """Kahn pass over an acyclic graph, keeping the longest distance from a source."""
    in_degree: dict[str, int] = {nid: forward.in_degree(nid) for nid in forward.node_ids()}
    ranks: dict[str, int] = {}
    queue: deque[str] = deque()

    for node_id, degree in in_degree.items():
        if degree == 0:
            ranks[node_id] = 0
            queue.append(node_id)

    while queue:
        node_id = queue.popleft()
        rank = ranks[node_id]
        for target in forward.successors(node_id):
            if ranks.get(target, -1) < rank + 1:
                ranks[target] = rank + 1
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    for node_id in forward.node_ids():
        if node_id not in ranks:
            logger.warning("node %r unreachable by ranking pass; placing it on rank 0", node_id)
            ranks[node_id] = 0

    return ranks


class RankAssignment:
    def __init__(self, ranks: dict[str, int], rank_count: int, back_edges: set[int]) -> None:
        self.ranks = ranks
        self.rank_count = rank_count
        self.back_edges = back_edges

    @classmethod
    def assign(cls, spec: DiagramSpec) -> RankAssignment:
        back_edges = find_back_edges(GraphIR.from_spec(spec))
        forward = GraphIR.from_spec(spec, exclude=back_edges)
        ranks = longest_path_ranks(forward)
        rank_count = (max(ranks.values()) + 1) if ranks else 0
        logger.debug("ranked %d nodes into %d ranks (%d back-edges)", len(ranks), rank_count, len(back_edges))
        return cls(ranks=ranks, rank_count=rank_count, back_edges=back_edges)
