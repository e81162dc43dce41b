#!/usr/bin/env python3
"""
YAMLCOMMENTS CONFIGURATION
--------------------------
Tunable behaviour of an extraction run. Passed explicitly into the
engine and the attributor; there is no global configuration state.
"""

from dataclasses import dataclass

DEFAULT_DOCUMENT_LABEL = "document"
# YAML has exactly one line-comment marker
COMMENT_MARKER = "#"


@dataclass(frozen=True)
class ExtractorConfig:
    """
    Settings for a CommentExtractor.

    document_label:   Path rendered for the document root and for comments
                      that have no following node.
    include_trailing: Emit comments that follow content on the same line.
    """
    document_label: str = DEFAULT_DOCUMENT_LABEL
    include_trailing: bool = True
