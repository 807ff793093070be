"""Output formatting for validated pages."""

from .lib import OutputGenerator, RenderOutput, format_component_tree

__all__ = [
    "format_component_tree",
    "RenderOutput",
    "OutputGenerator",
]
