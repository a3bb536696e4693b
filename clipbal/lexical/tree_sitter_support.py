"""
Tree-sitter infrastructure for lexical classification.
Provides grammar loading, query management, and string/comment region extraction.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type

from tree_sitter import Tree, Node, Parser, Query, Language, QueryCursor

from .model import Classifier, DEFAULT_ESCAPE_CHAR, LexicalRole
from .regions import Region, RegionIndex

logger = logging.getLogger(__name__)

# Capture names of the per-language "lexical" query
_ROLE_BY_CAPTURE = {
    "string": LexicalRole.STRING,
    "comment": LexicalRole.COMMENT,
}


class TreeSitterDocument(ABC):
    """
    Wrapper for Tree-sitter parsed document with query system.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode('utf-8')
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for queries.

        Returns:
            Language instance
        """
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Get named query definitions for this language.

        Returns:
            Dict mapping query names to query strings
        """
        pass

    def get_parser(self) -> Parser:
        return Parser(self.get_language())

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = self.get_parser()
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples

        Raises:
            ValueError: If query is not defined for this language
        """
        root_node = self.root_node

        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        results = []
        cursor = QueryCursor(self._query_cache[query_name])
        for _pattern_index, captures in cursor.matches(root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        return results

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Get char range for a node."""
        start_char = self.byte_to_char_position(node.start_byte)
        end_char = self.byte_to_char_position(node.end_byte)
        return start_char, end_char

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Correctly convert byte position to character position in Unicode text.
        Guarantees that if position points to the middle of a multi-byte character,
        returns position before that character.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)

        # UTF-8 guarantees maximum 4 bytes per character
        start = max(0, byte_pos - 4)
        for end in range(byte_pos, start - 1, -1):
            try:
                return len(self._text_bytes[:end].decode('utf-8'))
            except UnicodeDecodeError:
                continue
        return 0


class TreeSitterClassifier(Classifier):
    """
    Classifier that marks string and comment nodes of a tree-sitter parse.

    Clipboard fragments are rarely complete programs; tree-sitter recovers
    from the resulting errors and still yields string and comment tokens
    around the broken spots.
    """

    #: Concrete document class for the language
    document_cls: Type[TreeSitterDocument]
    #: Extension hint passed to the document (grammar variant selection)
    ext: str = ""

    def __init__(self, escape_char: str = DEFAULT_ESCAPE_CHAR):
        super().__init__(escape_char)

    def create_document(self, text: str) -> TreeSitterDocument:
        return self.document_cls(text, self.ext)

    def regions(self, text: str) -> RegionIndex:
        if not text:
            return RegionIndex()

        doc = self.create_document(text)
        if doc.has_error():
            logger.debug("%s: fragment has syntax errors, using recovered tree", self.name)

        regions = []
        for node, capture_name in doc.query("lexical"):
            role = _ROLE_BY_CAPTURE.get(capture_name)
            if role is None:
                continue
            start, end = doc.get_node_range(node)
            regions.append(Region(start, end, role))

        logger.debug("%s: %d lexical nodes", self.name, len(regions))
        return RegionIndex(regions)


__all__ = ["TreeSitterDocument", "TreeSitterClassifier", "Node"]
