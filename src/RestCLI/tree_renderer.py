"""Indented text output for resource trees."""

from __future__ import annotations

import logging
from typing import Iterable

from RestCLI.compressor import compress_tree
from RestCLI.models import CompressedNode, Record
from RestCLI.tree_builder import build_tree

logger = logging.getLogger(__name__)

INDENT_WIDTH = 2


def render_tree(root: CompressedNode, indent_width: int = INDENT_WIDTH) -> str:
    """Render the children of *root* as nested blocks.

    Example output:
        .languages:
          .rust:
            GC no
            .applications.restcli:
              category ultility
    """
    lines: list[str] = []
    _render_children(root, lines, depth=0, indent_width=indent_width)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _render_children(
    node: CompressedNode,
    lines: list[str],
    depth: int,
    indent_width: int,
) -> None:
    """Recursively render the sorted children of *node* into lines."""
    prefix = " " * (depth * indent_width)
    body = " " * ((depth + 1) * indent_width)

    # Plain code point order, C/C++ sorts before go. Segments break ties
    # between equal labels such as a.b (one segment) and a.b (two).
    for child in sorted(node.children, key=lambda c: (c.name, c.segments)):
        lines.append(f"{prefix}.{child.name}:")
        for key, value in child.attributes:
            lines.append(f"{body}{key} {value}")
        _render_children(child, lines, depth + 1, indent_width)


def render_records(
    records: Iterable[Record],
    indent_width: int = INDENT_WIDTH,
) -> str:
    """Decode, build, compress and render *records* in one pass."""
    root = build_tree(records)
    compressed = compress_tree(root)
    output = render_tree(compressed, indent_width=indent_width)
    logger.debug("Rendered %d top-level blocks", len(compressed.children))
    return output
