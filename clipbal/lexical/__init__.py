from __future__ import annotations

# Public API of lexical package:
#  • Classifier / LexicalContext: classification contract
#  • get_classifier: lazy retrieval of a classifier by language name
from .model import Classifier, FunctionClassifier, LexicalContext, LexicalRole, is_escaped
from .plain import PlainClassifier
from .registry import get_classifier, language_for_path, list_languages, register_lazy

__all__ = [
    "Classifier",
    "FunctionClassifier",
    "LexicalContext",
    "LexicalRole",
    "PlainClassifier",
    "is_escaped",
    "get_classifier",
    "language_for_path",
    "list_languages",
    "register_lazy",
]

# ---- Lightweight (lazy) registration of built-in classifiers -----------------
# No heavy module imports here, only module:class strings.
# Grammar packages are imported exactly at the moment of first request.

# Marker-driven styles
register_lazy(module=".plain", class_name="PlainClassifier", names=["plain"], extensions=[".txt"])
register_lazy(module=".style", class_name="CStyleClassifier", names=["c-style"],
              extensions=[".kt", ".kts", ".scala", ".go", ".cs", ".swift"])
register_lazy(module=".style", class_name="HashStyleClassifier", names=["hash"],
              extensions=[".sh", ".rb", ".yaml", ".yml", ".toml"])
register_lazy(module=".style", class_name="LispStyleClassifier", names=["lisp"],
              extensions=[".el", ".lisp", ".clj", ".scm"])

# Tree-sitter based classifiers
register_lazy(module=".langs.python", class_name="PythonClassifier", names=["python"], extensions=[".py"])
register_lazy(module=".langs.javascript", class_name="JavaScriptClassifier", names=["javascript"],
              extensions=[".js", ".jsx", ".mjs"])
register_lazy(module=".langs.typescript", class_name="TypeScriptClassifier", names=["typescript"], extensions=[".ts"])
register_lazy(module=".langs.typescript", class_name="TsxClassifier", names=["tsx"], extensions=[".tsx"])
register_lazy(module=".langs.c", class_name="CClassifier", names=["c"], extensions=[".c", ".h"])
register_lazy(module=".langs.cpp", class_name="CppClassifier", names=["cpp"],
              extensions=[".cpp", ".cc", ".cxx", ".hpp", ".hxx"])
register_lazy(module=".langs.java", class_name="JavaClassifier", names=["java"], extensions=[".java"])
register_lazy(module=".langs.rust", class_name="RustClassifier", names=["rust"], extensions=[".rs"])
