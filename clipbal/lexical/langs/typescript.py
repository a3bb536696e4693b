"""
TypeScript and TSX lexical classifiers on top of tree-sitter-typescript.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..tree_sitter_support import TreeSitterClassifier, TreeSitterDocument
from .javascript import QUERIES


class TypeScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        if self.ext == "tsx":
            # TS and TSX have two different grammars in one package
            return Language(tsts.language_tsx())
        return Language(tsts.language_typescript())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class TypeScriptClassifier(TreeSitterClassifier):
    name = "typescript"
    ext = "ts"
    document_cls = TypeScriptDocument


class TsxClassifier(TypeScriptClassifier):
    name = "tsx"
    ext = "tsx"
