"""
JavaScript lexical classifier on top of tree-sitter-javascript.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterClassifier, TreeSitterDocument

QUERIES = {
    # Template substitutions are treated as part of the template string
    "lexical": """
    (string) @string
    (template_string) @string
    (regex) @string
    (comment) @comment
    """,
}


class JavaScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class JavaScriptClassifier(TreeSitterClassifier):
    name = "javascript"
    ext = "js"
    document_cls = JavaScriptDocument
