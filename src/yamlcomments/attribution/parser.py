#!/usr/bin/env python3
"""
YAMLCOMMENTS PARSER - The Surveyor
----------------------------------
Thin boundary around ruamel.yaml. Produces the composed node trees
(MappingNode / SequenceNode / ScalarNode) whose marks carry the character
offsets the indexer needs. Parse errors are not caught here.
"""

import logging
from typing import List

from ruamel.yaml import YAML
from ruamel.yaml.nodes import Node

logger = logging.getLogger("yamlcomments.parser")


class DocumentParser:
    """
    Composes every document of a YAML stream into position-aware nodes.
    """

    def _new_yaml(self) -> YAML:
        # Round-trip loader: pure-Python scanner, marks index into the input text
        return YAML(typ='rt')

    def parse(self, text: str) -> List[Node]:
        """
        Returns one root node per document in the stream.

        Raises:
            ruamel.yaml.YAMLError: the text is not well-formed YAML.
        """
        yaml = self._new_yaml()
        roots = list(yaml.compose_all(text))
        logger.debug(f"Composed {len(roots)} document(s) from {len(text)} characters")
        return roots
