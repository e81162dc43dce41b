#!/usr/bin/env python3
"""
YAMLCOMMENTS INDEX CONTEXT
--------------------------
The record handed from the TreeIndexer to the CommentAttributor.
Built once per extraction and never mutated afterwards.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from yamlcomments.core.models import CatalogEntry, Span


@dataclass(frozen=True)
class IndexResult:
    """
    Position tables for one source text.
    """
    catalog: Tuple[CatalogEntry, ...] = ()      # Sorted by start, stable
    literal_spans: Tuple[Span, ...] = ()        # Block scalar bodies
    value_spans: Tuple[Span, ...] = ()          # Scalar contents (values and keys)

    @property
    def first_node_start(self) -> Optional[int]:
        """Offset of the earliest positioned node, or None for an empty catalog."""
        return self.catalog[0].start if self.catalog else None

    def in_literal(self, offset: int) -> bool:
        return any(span.contains(offset) for span in self.literal_spans)

    def in_value(self, offset: int) -> bool:
        return any(span.strictly_contains(offset) for span in self.value_spans)
