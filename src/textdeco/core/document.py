"""Text shapes exchanged between the layout and reconstruction passes."""

from __future__ import annotations

from uuid import uuid4

from pydantic import BaseModel, Field


class BoundingBox(BaseModel):
    """Bounding box in PDF points, origin at the bottom-left of the page."""

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def left_x(self) -> float:
        return self.x0

    @property
    def right_x(self) -> float:
        return self.x1

    @property
    def bottom_y(self) -> float:
        return self.y0

    @property
    def top_y(self) -> float:
        return self.y1


class TextChunk(BaseModel):
    """A small positioned text fragment from the layout pass.

    ``chunk_id`` is the chunk's identity: copies made with ``model_copy``
    share it, separately created chunks never do, even with equal content.
    """

    value: str | None = None
    page_number: int | None = None
    bbox: BoundingBox | None = None
    chunk_id: str = Field(default_factory=lambda: uuid4().hex)


class TextNode(BaseModel):
    """A reconstructed text region (line, paragraph, heading, ...)."""

    text: str = ""
    page_number: int | None = None
    bbox: BoundingBox | None = None
    node_type: str = "paragraph"  # paragraph, line, heading, etc.
