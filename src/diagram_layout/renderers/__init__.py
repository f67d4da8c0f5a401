"""Renderers turning a LayoutResult into output documents."""

from diagram_layout.renderers.base import Renderer
from diagram_layout.renderers.document import JsonRenderer, layout_to_dict

__all__ = ["JsonRenderer", "Renderer", "layout_to_dict"]
