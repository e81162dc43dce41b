#!/usr/bin/env python3
"""
YAMLCOMMENTS ENGINE - The Orchestrator
--------------------------------------
Runs one extraction in a fixed order:
    source text -> DocumentParser -> TreeIndexer -> CommentAttributor

Parse failures raised by ruamel.yaml propagate to the caller untouched;
no partial result is produced without a tree.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from yamlcomments.attribution.attributor import CommentAttributor
from yamlcomments.attribution.indexer import TreeIndexer
from yamlcomments.attribution.parser import DocumentParser
from yamlcomments.core.config import ExtractorConfig
from yamlcomments.core.models import ExtractionResult

logger = logging.getLogger("yamlcomments.engine")


class CommentExtractor:
    """
    Principal entry point for extracting comments from YAML documents.
    Stateless between calls: every run builds its own tables.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()
        self.parser = DocumentParser()
        self.indexer = TreeIndexer()
        self.attributor = CommentAttributor(self.config)

    def extract(self, source: str) -> ExtractionResult:
        """
        Extracts every comment of `source` with the node it annotates.

        Raises:
            ruamel.yaml.YAMLError: the document cannot be parsed.
        """
        # Parser marks and line scanning must agree on offset 0
        text = source.lstrip('\ufeff')

        # --- PHASE 1: PARSE ---
        roots = self.parser.parse(text)

        # --- PHASE 2: INDEX ---
        index = self.indexer.index(roots, text)

        # --- PHASE 3: ATTRIBUTE ---
        comments = self.attributor.attribute(text, index)

        logger.debug(f"Extracted {len(comments)} comment(s) from {len(roots)} document(s)")
        return ExtractionResult(comments=comments)

    def extract_file(self, file_path: Union[str, Path]) -> ExtractionResult:
        """
        Reads a file (BOM-aware) and extracts its comments.

        Raises:
            OSError: the file cannot be read.
            UnicodeDecodeError: the file is not UTF-8.
            ruamel.yaml.YAMLError: the document cannot be parsed.
        """
        path = Path(file_path)
        logger.debug(f"Reading {path}")
        return self.extract(path.read_text(encoding='utf-8-sig'))


def extract_yaml_comments(source: str, config: Optional[ExtractorConfig] = None) -> ExtractionResult:
    """
    Extract comments from a YAML document.

    Example:
        >>> extract_yaml_comments("a: 1\\n# greeting\\nb: 2").comments
        [CommentRecord(line=2, path='b', text='greeting')]
    """
    return CommentExtractor(config).extract(source)
