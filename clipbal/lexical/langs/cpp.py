"""
C++ lexical classifier on top of tree-sitter-cpp.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterClassifier, TreeSitterDocument

QUERIES = {
    "lexical": """
    (string_literal) @string
    (raw_string_literal) @string
    (char_literal) @string
    (system_lib_string) @string
    (comment) @comment
    """,
}


class CppDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_cpp as tscpp
        return Language(tscpp.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class CppClassifier(TreeSitterClassifier):
    name = "cpp"
    ext = "cpp"
    document_cls = CppDocument
