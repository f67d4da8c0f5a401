"""Intermediate representation: spec model and GraphIR."""

from diagram_layout.ir.graph import GraphIR
from diagram_layout.ir.spec import DiagramEdge, DiagramGroup, DiagramNode, DiagramSpec, GroupStyle, NodeStyle

__all__ = [
    "DiagramEdge",
    "DiagramGroup",
    "DiagramNode",
    "DiagramSpec",
    "GraphIR",
    "GroupStyle",
    "NodeStyle",
]
