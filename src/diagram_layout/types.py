"""Shared type definitions for diagram-layout.

Enums used across the spec model, layout, and renderers. Values match the
strings of the declarative input format.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    TB = "TB"
    LR = "LR"

    @classmethod
    def default(cls) -> Direction:
        return cls.TB


class NodeShape(Enum):
    Rectangle = "rectangle"
    Rounded = "rounded"
    Pill = "pill"
    Diamond = "diamond"
    Circle = "circle"

    @classmethod
    def default(cls) -> NodeShape:
        return cls.Rectangle


class NodeVariant(Enum):
    Default = "default"
    Icon = "icon"  # icon-dominant card

    @classmethod
    def default(cls) -> NodeVariant:
        return cls.Default


class EdgeStyle(Enum):
    Solid = "solid"
    Dashed = "dashed"
    Dotted = "dotted"

    @classmethod
    def default(cls) -> EdgeStyle:
        return cls.Solid
