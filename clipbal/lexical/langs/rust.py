"""
Rust lexical classifier on top of tree-sitter-rust.
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
    (line_comment) @comment
    (block_comment) @comment
    """,
}


class RustDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_rust as tsrust
        return Language(tsrust.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class RustClassifier(TreeSitterClassifier):
    name = "rust"
    ext = "rs"
    document_cls = RustDocument
