"""
Python lexical classifier on top of tree-sitter-python.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterClassifier, TreeSitterDocument

QUERIES = {
    # f-string interpolations stay inside the string node
    "lexical": """
    (string) @string
    (comment) @comment
    """,
}


class PythonDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_python as tspython
        return Language(tspython.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class PythonClassifier(TreeSitterClassifier):
    name = "python"
    ext = "py"
    document_cls = PythonDocument
