#!/usr/bin/env python3
"""
YAMLCOMMENTS CORE MODELS
------------------------
Defines the fundamental data structures shared by the indexer, the
attributor and the CLI. Everything here is immutable once built.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Union


class NodeKind(Enum):
    """Coarse node classification carried by every catalog entry."""
    CONTAINER = "container"
    SCALAR = "scalar"


class UnrepresentableKey(Enum):
    """
    Path segment used for map keys that cannot be rendered as text
    (sequences or mappings used as keys).
    """
    NON_SCALAR = "<non-scalar-key>"

    def __str__(self) -> str:
        return self.value


PathSegment = Union[str, int, UnrepresentableKey]


def render_path(segments: Sequence[PathSegment]) -> str:
    """
    Joins path segments with dots. The document root renders as ''.
    Example: ("spec", "ports", 0) -> "spec.ports.0"
    """
    return ".".join(str(segment) for segment in segments)


@dataclass(frozen=True)
class Span:
    """A half-open [start, end) range of character offsets."""
    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    def strictly_contains(self, offset: int) -> bool:
        return self.start < offset < self.end


@dataclass(frozen=True)
class CatalogEntry:
    """
    One positioned node of the document tree.

    Produced by the TreeIndexer in pre-order and stored sorted by `start`.
    """
    start: int              # Offset of the node's first character
    end: int                # Offset just past the node's last character
    path: str               # Dotted path from the root ('' for the root)
    kind: NodeKind = NodeKind.SCALAR

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER


@dataclass(frozen=True)
class CommentRecord:
    """
    A single extracted comment and the node it annotates.
    """
    line: int   # 1-indexed source line of the comment marker
    path: str   # Dotted path of the annotated node, or the document label
    text: str   # Comment body without the marker and one optional space

    def to_dict(self) -> Dict[str, Any]:
        return {"line": self.line, "path": self.path, "text": self.text}


@dataclass
class ExtractionResult:
    """Outcome of a single extraction run."""
    comments: List[CommentRecord] = field(default_factory=list)

    def to_list(self) -> List[Dict[str, Any]]:
        return [comment.to_dict() for comment in self.comments]
