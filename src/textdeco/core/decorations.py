"""Underline marks recorded on text chunks and re-attached to text nodes."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from textdeco.core.document import BoundingBox, TextChunk, TextNode

logger = logging.getLogger(__name__)

# Slack for rounding differences between chunk boxes and node boxes
POSITION_TOLERANCE = 1.0


class DecorationMark(BaseModel):
    """Snapshot of an underlined chunk, taken when it was registered."""

    model_config = ConfigDict(frozen=True)

    text: str
    page_number: int | None = None
    left_x: float = 0.0
    right_x: float = 0.0
    bottom_y: float = 0.0
    top_y: float = 0.0

    @classmethod
    def from_chunk(cls, chunk: TextChunk) -> DecorationMark:
        box = chunk.bbox
        if box is None:
            return cls(text=chunk.value, page_number=chunk.page_number)
        return cls(
            text=chunk.value,
            page_number=chunk.page_number,
            left_x=box.left_x,
            right_x=box.right_x,
            bottom_y=box.bottom_y,
            top_y=box.top_y,
        )

    def belongs_to(
        self,
        page_number: int | None,
        bbox: BoundingBox,
        tolerance: float = POSITION_TOLERANCE,
    ) -> bool:
        """Check whether this mark lies on ``page_number`` inside ``bbox``.

        The box is grown by ``tolerance`` on every side.
        """
        if self.page_number != page_number:
            return False
        return (
            self.left_x >= bbox.left_x - tolerance
            and self.right_x <= bbox.right_x + tolerance
            and self.bottom_y >= bbox.bottom_y - tolerance
            and self.top_y <= bbox.top_y + tolerance
        )


class TextDecorations:
    """Pending underline marks for one document-processing run.

    The layout pass calls :meth:`register` for each underlined chunk; the
    reconstruction pass calls :meth:`pull_matches_for` for each text node it
    builds. A mark is handed out at most once. Call :meth:`clear` before
    reusing the instance for another document.

    Usage:
        decorations = TextDecorations()
        decorations.register(chunk)
        marks = decorations.pull_matches_for(node)
    """

    def __init__(self, tolerance: float = POSITION_TOLERANCE) -> None:
        if tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance
        self._marks: list[DecorationMark] = []
        self._registered: set[str] = set()

    def __len__(self) -> int:
        return len(self._marks)

    def __bool__(self) -> bool:
        return bool(self._marks)

    @property
    def pending(self) -> tuple[DecorationMark, ...]:
        """Marks not yet matched, in registration order."""
        return tuple(self._marks)

    def clear(self) -> None:
        self._marks.clear()
        self._registered.clear()

    def register(self, chunk: TextChunk | None) -> None:
        """Record an underline on ``chunk``.

        Chunks without visible text, and chunks already registered since the
        last :meth:`clear`, are ignored.
        """
        if chunk is None:
            return
        value = chunk.value
        if value is None or not value.strip():
            logger.debug("Skipping underline on blank chunk %s", chunk.chunk_id)
            return
        if chunk.chunk_id in self._registered:
            logger.debug("Chunk %s already registered", chunk.chunk_id)
            return
        self._registered.add(chunk.chunk_id)
        self._marks.append(DecorationMark.from_chunk(chunk))

    def pull_matches_for(self, node: TextNode | None) -> list[DecorationMark]:
        """Remove and return every pending mark that ``node`` contains."""
        if node is None or not self._marks:
            return []
        node_box = node.bbox
        if node_box is None:
            return []

        matches: list[DecorationMark] = []
        remaining: list[DecorationMark] = []
        for mark in self._marks:
            if mark.belongs_to(node.page_number, node_box, self.tolerance):
                matches.append(mark)
            else:
                remaining.append(mark)
        self._marks = remaining

        if matches:
            logger.debug(
                "Matched %d underline(s) to %s on page %s",
                len(matches), node.node_type, node.page_number,
            )
        return matches
