"""
C lexical classifier on top of tree-sitter-c.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterClassifier, TreeSitterDocument

QUERIES = {
    "lexical": """
    (string_literal) @string
    (char_literal) @string
    (system_lib_string) @string
    (comment) @comment
    """,
}


class CDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_c as tsc
        return Language(tsc.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class CClassifier(TreeSitterClassifier):
    name = "c"
    ext = "c"
    document_cls = CDocument
