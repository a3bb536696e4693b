"""
Java lexical classifier on top of tree-sitter-java.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterClassifier, TreeSitterDocument

QUERIES = {
    # Text blocks ("""…""") are string_literal nodes as well
    "lexical": """
    (string_literal) @string
    (character_literal) @string
    (line_comment) @comment
    (block_comment) @comment
    """,
}


class JavaDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_java as tsjava
        return Language(tsjava.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class JavaClassifier(TreeSitterClassifier):
    name = "java"
    ext = "java"
    document_cls = JavaDocument
