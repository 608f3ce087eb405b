"""Collapse attribute-free single-child chains into dotted labels."""

from __future__ import annotations

from RestCLI.models import CompressedNode, Node


def compress_tree(root: Node) -> CompressedNode:
    """Return the compressed view of a built tree.

    The root itself is never folded into a label: each of its children
    starts a chain of its own. A chain keeps absorbing the only child of
    the current node while that node has no attributes, e.g.

        rust {GC: no}
          applications
            restcli {category: ultility}

    becomes ``rust`` with a single child ``applications.restcli``.
    """
    return CompressedNode(
        segments=(),
        attributes=(),
        children=tuple(_compress(child) for child in root.children.values()),
    )


def _compress(node: Node) -> CompressedNode:
    segments = [node.name]
    while not node.attributes and len(node.children) == 1:
        node = next(iter(node.children.values()))
        segments.append(node.name)

    return CompressedNode(
        segments=tuple(segments),
        attributes=tuple(node.attributes.items()),
        children=tuple(_compress(child) for child in node.children.values()),
    )
