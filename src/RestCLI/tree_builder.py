"""Hierarchy reconstruction from flat resource records."""

from __future__ import annotations

import logging
from typing import Iterable

from RestCLI.models import Node, Record
from RestCLI.path_decoder import decode_path

logger = logging.getLogger(__name__)


def build_tree(records: Iterable[Record]) -> Node:
    """Build the resource tree implied by the record paths.

    Records are applied in order. When two records resolve to the same
    decoded path their attributes are merged and the later value wins for
    a shared key; the key keeps the position it was first seen at.

    Raises:
        MalformedPathError: on the first record whose path cannot be decoded.
    """
    root = Node()
    count = 0
    created = 0

    for record in records:
        segments = decode_path(record.path)

        node = root
        for segment in segments:
            child = node.children.get(segment)
            if child is None:
                child = Node(name=segment)
                node.children[segment] = child
                created += 1
            node = child

        _merge_attributes(node, record)
        count += 1

    logger.debug("Built tree from %d records (%d nodes)", count, created)
    return root


def _merge_attributes(node: Node, record: Record) -> None:
    for key, value in record.attributes.items():
        previous = node.attributes.get(key)
        if previous is not None and previous != value:
            logger.debug(
                "%s: %s overwritten (%r -> %r)", record.path, key, previous, value
            )
        node.attributes[key] = value
