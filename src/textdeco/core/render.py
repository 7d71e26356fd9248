"""Re-apply pulled underline marks to a text node's text."""

from __future__ import annotations

from collections.abc import Iterable

from textdeco.core.decorations import DecorationMark


def apply_underlines(
    text: str,
    marks: Iterable[DecorationMark],
    open_tag: str = "<u>",
    close_tag: str = "</u>",
) -> str:
    """Wrap each mark's text in ``open_tag``/``close_tag``.

    Marks are placed left to right by ``left_x``; each one wraps the first
    occurrence of its text after the previous wrap. Marks whose text is not
    found are skipped.
    """
    parts: list[str] = []
    cursor = 0
    for mark in sorted(marks, key=lambda m: m.left_x):
        needle = mark.text.strip()
        start = text.find(needle, cursor)
        if start < 0:
            continue
        end = start + len(needle)
        parts.append(text[cursor:start])
        parts.append(f"{open_tag}{needle}{close_tag}")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)
