"""Underline tracking between a document's layout and reconstruction passes."""

from textdeco.core.decorations import POSITION_TOLERANCE, DecorationMark, TextDecorations
from textdeco.core.document import BoundingBox, TextChunk, TextNode
from textdeco.core.render import apply_underlines

__all__ = [
    "POSITION_TOLERANCE",
    "BoundingBox",
    "DecorationMark",
    "TextChunk",
    "TextDecorations",
    "TextNode",
    "apply_underlines",
]
