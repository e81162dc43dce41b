#!/usr/bin/env python3
"""
YAMLCOMMENTS TREE INDEXER - The Cartographer
--------------------------------------------
Walks composed ruamel.yaml node trees once and records where every node
lives in the source text. The resulting catalog is what the attributor
consults to decide which node a comment belongs to.

Three tables are produced:
1. Catalog entries (start, end, dotted path, kind), sorted by start.
2. Literal spans: block scalar bodies, opaque to comment scanning.
3. Value spans: scalar contents, used to tell a '#' inside a value
   (URLs, quoted strings, keys) from a real comment.
"""

import logging
from typing import Any, List, Optional, Sequence, Set, Tuple

from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode

from yamlcomments.attribution.context import IndexResult
from yamlcomments.core.models import (
    CatalogEntry,
    NodeKind,
    PathSegment,
    Span,
    UnrepresentableKey,
    render_path,
)

logger = logging.getLogger("yamlcomments.indexer")

BLOCK_STYLES = ('|', '>')


def node_span(node: Any) -> Optional[Tuple[int, int]]:
    """
    Returns (start, end) offsets of a node, or None when the node carries
    no position (synthesized nodes).
    """
    start_mark = getattr(node, 'start_mark', None)
    end_mark = getattr(node, 'end_mark', None)
    if start_mark is None or end_mark is None:
        return None
    return start_mark.index, end_mark.index


def key_segment(key_node: Any) -> PathSegment:
    """Scalar keys render as their text; anything else as the sentinel."""
    if isinstance(key_node, ScalarNode):
        return str(key_node.value)
    return UnrepresentableKey.NON_SCALAR


class TreeIndexer:
    """
    Builds an IndexResult from composed document roots.

    A fresh indexer state is used for every call, so one instance may be
    shared freely.
    """

    def index(self, roots: Sequence[Any], source: str) -> IndexResult:
        walk = _IndexWalk(source)
        for root in roots:
            walk.visit(root, [])

        # Stable sort: a container keeps precedence over a child sharing its start
        catalog = sorted(walk.catalog, key=lambda entry: entry.start)
        logger.debug(
            f"Indexed {len(catalog)} node(s), {len(walk.literal_spans)} literal span(s), "
            f"{len(walk.value_spans)} value span(s)"
        )
        return IndexResult(
            catalog=tuple(catalog),
            literal_spans=tuple(walk.literal_spans),
            value_spans=tuple(walk.value_spans),
        )


class _IndexWalk:
    """Mutable accumulator for a single pre-order traversal."""

    def __init__(self, source: str):
        self.source = source
        self.catalog: List[CatalogEntry] = []
        self.literal_spans: List[Span] = []
        self.value_spans: List[Span] = []
        # Aliases resolve to the anchored node object; index each object once
        self.seen: Set[int] = set()

    def visit(self, node: Any, path: List[PathSegment]):
        if node is None or id(node) in self.seen:
            return
        self.seen.add(id(node))

        span = node_span(node)
        rendered = render_path(path)

        if isinstance(node, MappingNode):
            if span is not None:
                self.catalog.append(CatalogEntry(span[0], span[1], rendered, NodeKind.CONTAINER))
            for key_node, value_node in node.value:
                child_path = path + [key_segment(key_node)]
                self._record_key(key_node, render_path(child_path))
                self.visit(value_node, child_path)

        elif isinstance(node, SequenceNode):
            if span is not None:
                self.catalog.append(CatalogEntry(span[0], span[1], rendered, NodeKind.CONTAINER))
            for i, child in enumerate(node.value):
                self.visit(child, path + [i])

        else:
            # ScalarNode, or an unknown positioned node treated as a leaf.
            # Empty values (`a:`) are zero-width and sit on the next token,
            # usually the following key; their own key entry carries the path.
            if span is None or span[0] == span[1]:
                return
            self.catalog.append(CatalogEntry(span[0], span[1], rendered, NodeKind.SCALAR))
            if isinstance(node, ScalarNode) and node.style in BLOCK_STYLES:
                body = self._block_body(span)
                self.literal_spans.append(body)
                self.value_spans.append(body)
            else:
                self.value_spans.append(Span(*span))

    def _record_key(self, key_node: Any, value_path: str):
        """
        Keys are catalogued under their value's path, so a comment above
        `copy: *anchor` still finds `copy` even though the alias has no
        position of its own. A '#' inside a key is never a comment.
        """
        span = node_span(key_node)
        if span is None:
            return
        self.catalog.append(CatalogEntry(span[0], span[1], value_path, NodeKind.SCALAR))
        self.value_spans.append(Span(*span))

    def _block_body(self, span: Tuple[int, int]) -> Span:
        """
        The body of a block scalar starts on the line after its '|' / '>'
        header, leaving the header line open for a trailing comment.
        """
        start, end = span
        newline = self.source.find('\n', start, end)
        body_start = end if newline == -1 else newline + 1
        return Span(body_start, end)
