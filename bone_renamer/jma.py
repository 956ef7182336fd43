"""Node-name rewriter for JMA-family animation exports.

The files are line oriented with one value per line:

  1  format version
  2  frame count
  3  frame rate
  4  actor names index
  5  actor names
  6  node count          (authoritative)
  7  node checksum
  8+ node records, three lines each: name, first child index, next sibling index
  .. keyframe data

Only the name line of each node record is touched. Everything else is copied
verbatim, so the rewrite is purely structural.
"""
from __future__ import annotations

import logging
import re
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)

NODE_COUNT_LINE = 6
NODES_START_LINE = 8
LINES_PER_NODE = 3

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_COUNT_RE = re.compile(r"[+-]?[0-9]+")


class RewriteResult(NamedTuple):
    text: str
    renamed_count: int


def split_lines(text: str) -> List[str]:
    return _LINE_SPLIT_RE.split(text)


def read_node_count(lines: List[str]) -> Optional[int]:
    """Return the node count from line 6, or ``None`` when it is unusable."""
    if len(lines) < NODE_COUNT_LINE:
        return None
    raw = lines[NODE_COUNT_LINE - 1].strip()
    if not _COUNT_RE.fullmatch(raw):
        return None
    count = int(raw, 10)
    if count <= 0:
        return None
    return count


def node_span(node_count: int) -> range:
    """Zero-based line indexes covered by ``node_count`` node records."""
    start = NODES_START_LINE - 1
    return range(start, start + LINES_PER_NODE * node_count)


def is_name_line(index: int) -> bool:
    offset = index - (NODES_START_LINE - 1)
    return offset >= 0 and offset % LINES_PER_NODE == 0


def rewrite(raw_text: str, prefix: str) -> RewriteResult:
    """Prefix every node name in ``raw_text`` with ``prefix`` and a space.

    A document whose node count is missing or invalid comes back unchanged
    with a zero count and a logged warning. Records past the end of a
    truncated document are simply not there to rewrite.
    """
    lines = split_lines(raw_text)
    node_count = read_node_count(lines)
    if node_count is None:
        found = lines[NODE_COUNT_LINE - 1].strip() if len(lines) >= NODE_COUNT_LINE else None
        logger.warning("Could not read node count or invalid count (line %d: %r)", NODE_COUNT_LINE, found)
        return RewriteResult(raw_text, 0)

    span = node_span(node_count)
    renamed = 0
    for i in range(span.start, min(span.stop, len(lines))):
        if not is_name_line(i):
            continue
        name = lines[i].strip()
        if not name:
            continue
        lines[i] = prefix + " " + name
        renamed += 1

    logger.debug("node_count=%d renamed=%d lines=%d", node_count, renamed, len(lines))
    return RewriteResult("\n".join(lines), renamed)


__all__ = [
    "LINES_PER_NODE",
    "NODES_START_LINE",
    "NODE_COUNT_LINE",
    "RewriteResult",
    "is_name_line",
    "node_span",
    "read_node_count",
    "rewrite",
    "split_lines",
]
