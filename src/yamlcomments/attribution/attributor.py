#!/usr/bin/env python3
"""
YAMLCOMMENTS COMMENT ATTRIBUTOR - The Matchmaker
------------------------------------------------
Scans the raw source text line by line, finds genuine comment markers and
decides which catalogued node each comment annotates.

Per line, only the first marker is inspected:
    no marker            -> nothing
    inside block body    -> skipped (literal content)
    inside a scalar      -> skipped (e.g. 'path: /api#endpoint')
    only whitespace left -> full-line comment, annotates the next node
    content on the left  -> trailing comment, annotates the node before it
"""

import logging
import math
from bisect import bisect_left
from typing import List, Optional, Sequence

from yamlcomments.attribution.context import IndexResult
from yamlcomments.attribution.lines import LineIndex
from yamlcomments.core.config import COMMENT_MARKER, ExtractorConfig
from yamlcomments.core.models import CatalogEntry, CommentRecord

logger = logging.getLogger("yamlcomments.attributor")


class CommentAttributor:
    """
    Resolves comment occurrences to catalog paths.

    Holds configuration only; every table it works with is built per call
    and passed down explicitly.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()

    def attribute(self, source: str, index: IndexResult) -> List[CommentRecord]:
        """
        Returns the comments of `source` in ascending line order.
        Never raises on marker-free or degenerate input.
        """
        lines = LineIndex(source)
        starts = [entry.start for entry in index.catalog]
        first_start = index.first_node_start
        first_node_start = first_start if first_start is not None else math.inf

        records: List[CommentRecord] = []
        for line_no, line in enumerate(lines.lines, 1):
            # 1. Locate the first marker
            column = line.find(COMMENT_MARKER)
            if column == -1:
                continue
            offset = lines.start_of(line_no) + column

            # 2. Exclusions: block scalar bodies, then scalar text
            if index.in_literal(offset):
                logger.debug(f"Line {line_no}: marker inside block scalar, skipped")
                continue
            if index.in_value(offset):
                logger.debug(f"Line {line_no}: marker inside scalar value, skipped")
                continue

            # 3. Classification
            is_full_line = not line[:column].strip()
            if not is_full_line and not self.config.include_trailing:
                continue

            # 4. Resolution
            if is_full_line:
                if offset < first_node_start:
                    path = ""
                else:
                    path = self._nearest_following(index.catalog, starts,
                                                   lines.next_line_start(line_no))
            else:
                path = self._resolve_trailing(index.catalog, starts, lines, offset)

            records.append(CommentRecord(
                line=line_no,
                path=path or self.config.document_label,
                text=self._comment_text(line[column + 1:]),
            ))

        logger.debug(f"Attributed {len(records)} comment(s) across {len(lines)} line(s)")
        return records

    def _comment_text(self, body: str) -> str:
        """Drops one optional space (or tab) after the marker."""
        if body[:1] in (' ', '\t'):
            return body[1:]
        return body

    def _nearest_following(self, catalog: Sequence[CatalogEntry], starts: List[int],
                           offset: int) -> str:
        """Path of the first entry starting at or after `offset`, '' if none."""
        i = bisect_left(starts, offset)
        return catalog[i].path if i < len(catalog) else ""

    def _resolve_trailing(self, catalog: Sequence[CatalogEntry], starts: List[int],
                          lines: LineIndex, offset: int) -> str:
        """
        Picks the node a same-line comment follows:
        1. the entry on this line ending closest before the marker;
        2. a scalar opened earlier on this line (block scalar header);
        3. otherwise the next node after the marker.
        """
        # Walk back from the marker while entries still open on its line
        line_no = lines.line_of(offset)
        i = bisect_left(starts, offset) - 1
        same_line: List[CatalogEntry] = []
        while i >= 0 and lines.line_of(starts[i]) == line_no:
            same_line.append(catalog[i])
            i -= 1
        same_line.reverse()

        best: Optional[CatalogEntry] = None
        for entry in same_line:
            if entry.end <= offset and (best is None or entry.end > best.end):
                best = entry
        if best is not None:
            return best.path

        header: Optional[CatalogEntry] = None
        for entry in same_line:
            if not entry.is_container:
                header = entry
        if header is not None:
            return header.path

        return self._nearest_following(catalog, starts, offset)
