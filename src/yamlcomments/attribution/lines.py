#!/usr/bin/env python3
"""
YAMLCOMMENTS LINE INDEX
-----------------------
Bridges the two coordinate spaces of an extraction: character offsets
reported by the parser and 1-indexed lines scanned by the attributor.
"""

from bisect import bisect_right
from typing import List


class LineIndex:
    """
    Sorted table of line-start offsets with binary-search lookup.

    Lines are split on '\\n' only, so offsets stay aligned with the parser
    marks. A trailing '\\r' (CRLF input) is dropped from the line text.
    """

    def __init__(self, text: str):
        self.text = text
        self.starts: List[int] = [0]
        for i, char in enumerate(text):
            if char == '\n':
                self.starts.append(i + 1)
        self.lines: List[str] = [line[:-1] if line.endswith('\r') else line
                                 for line in text.split('\n')]

    def __len__(self) -> int:
        return len(self.lines)

    def start_of(self, line_no: int) -> int:
        """Offset of the first character of a 1-indexed line."""
        return self.starts[line_no - 1]

    def next_line_start(self, line_no: int) -> int:
        """Offset where the following line begins, or len(text) on the last line."""
        if line_no < len(self.starts):
            return self.starts[line_no]
        return len(self.text)

    def line_of(self, offset: int) -> int:
        """1-indexed line containing the offset."""
        return bisect_right(self.starts, offset)
