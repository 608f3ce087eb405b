"""Data classes for RestCLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class Record:
    path: str
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class Node:
    name: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: dict[str, Node] = field(default_factory=dict)

    def find(self, segments: Sequence[str]) -> Node | None:
        """Return the descendant at the decoded *segments*, or None."""
        node = self
        for segment in segments:
            node = node.children.get(segment)
            if node is None:
                return None
        return node


@dataclass(frozen=True)
class CompressedNode:
    segments: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[CompressedNode, ...] = ()

    @property
    def name(self) -> str:
        return ".".join(self.segments)
