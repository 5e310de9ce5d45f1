"""ASCII tree builder for indented outlines.

Example output:
    project
      ├── src
      │     ├── main.py
      │     └── utils.py
      └── README.md
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from ReTree.models import OutlineEntry
from ReTree.outline_parser import MARKER, parse_outline

logger = logging.getLogger(__name__)

BRANCH = "├"
CORNER = "└"
VERTICAL = "│"

_LEAD = "  "
_STEP = "      "


def glyph_column(depth: int) -> int:
    """Column of the branch glyph for an entry at *depth* (>= 1)."""
    return len(_LEAD) + (depth - 1) * len(_STEP)


def indent_for(depth: int) -> str:
    if depth > 1:
        return _LEAD + _STEP * (depth - 1)
    return _LEAD


def adjust_indent(entries: Sequence[OutlineEntry]) -> list[OutlineEntry]:
    """Strip markers and prefix every non-root entry with ``├── ``."""
    adjusted = []
    for entry in entries:
        label = entry.name.strip()[len(MARKER):]
        if entry.depth > 0:
            name = f"{indent_for(entry.depth)}{BRANCH}── {label}"
        else:
            name = label
        adjusted.append(replace(entry, name=name))
    return adjusted


def _is_last_sibling(entries: Sequence[OutlineEntry], index: int) -> bool:
    depth = entries[index].depth
    for following in entries[index + 1:]:
        if following.depth > depth:
            # descendant
            continue
        return following.depth < depth
    return True


def adjust_corner(entries: Sequence[OutlineEntry]) -> list[OutlineEntry]:
    """Turn ``├`` into ``└`` on the last sibling of each run."""
    return [
        replace(entry, name=entry.name.replace(BRANCH, CORNER, 1))
        if _is_last_sibling(entries, index)
        else replace(entry)
        for index, entry in enumerate(entries)
    ]


def _nearest_before(
    entries: Sequence[OutlineEntry], index: int, depth: int
) -> OutlineEntry | None:
    """Closest entry above *index* at exactly *depth* (the root is never searched)."""
    for i in range(index - 1, 0, -1):
        if entries[i].depth == depth:
            return entries[i]
    return None


def adjust_lines(entries: Sequence[OutlineEntry]) -> list[OutlineEntry]:
    """Thread ``│`` through the indent of entries below open ancestors.

    Expects corner-resolved entries: an ancestor still showing ``├`` has a
    later sibling, so its column stays open for every line in between.
    """
    adjusted = []
    for index, entry in enumerate(entries):
        name = entry.name
        for depth in range(entry.depth - 1, 0, -1):
            above = _nearest_before(entries, index, depth)
            if above is not None and BRANCH in above.name:
                col = glyph_column(depth)
                name = f"{name[:col]}{VERTICAL}{name[col + 1:]}"
        adjusted.append(replace(entry, name=name))
    return adjusted


def extract_names(entries: Sequence[OutlineEntry]) -> list[str]:
    return [entry.name for entry in entries]


def build_tree(entries: Sequence[OutlineEntry]) -> str:
    """Render depth-annotated, validated entries as a box-drawing tree."""
    staged = adjust_lines(adjust_corner(adjust_indent(entries)))
    return "\n".join(extract_names(staged))


def render(text: str) -> str:
    """Convert a ``- ``-marked outline into an ASCII tree.

    Raises:
        OutlineFormatError: if *text* is not a valid outline.
    """
    tree = build_tree(parse_outline(text))
    logger.debug("rendered tree:\n%s", tree)
    return tree
