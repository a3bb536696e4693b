from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Type

from ..errors import UnknownLanguageError
from .model import Classifier

__all__ = [
    "register_lazy",
    "get_classifier_class",
    "get_classifier",
    "language_for_path",
    "list_languages",
]


@dataclass(frozen=True)
class _LazySpec:
    module: str
    class_name: str
    names: Tuple[str, ...]
    extensions: Tuple[str, ...]


# Lazy specs: language name → where the class lives
_LAZY_BY_NAME: Dict[str, _LazySpec] = {}

# Language name by file extension
_NAME_BY_EXT: Dict[str, str] = {}

# Resolved classes by language name
_CLASS_BY_NAME: Dict[str, Type[Classifier]] = {}


def register_lazy(
    *,
    module: str,
    class_name: str,
    names: List[str] | Tuple[str, ...],
    extensions: List[str] | Tuple[str, ...] = (),
) -> None:
    """
    Register a classifier "by strings" without importing its module.
    Heavy grammar packages are imported only on first request.
    """
    spec = _LazySpec(
        module=module,
        class_name=class_name,
        names=tuple(n.lower() for n in names),
        extensions=tuple(e.lower() for e in extensions),
    )
    for name in spec.names:
        _LAZY_BY_NAME[name] = spec
    for ext in spec.extensions:
        _NAME_BY_EXT[ext] = spec.names[0]


def _load_from_spec(spec: _LazySpec) -> Type[Classifier]:
    # Both relative (".style") and absolute module names are supported
    mod = importlib.import_module(spec.module, package=__package__)
    cls = getattr(mod, spec.class_name, None)
    if cls is None:
        raise RuntimeError(f"Classifier class '{spec.class_name}' not found in {spec.module}")
    if not isinstance(cls, type) or not issubclass(cls, Classifier):
        raise TypeError(f"{spec.module}.{spec.class_name} is not a subclass of Classifier")

    for name in spec.names:
        _CLASS_BY_NAME[name] = cls
    return cls


def get_classifier_class(name: str) -> Type[Classifier]:
    """
    Return the classifier CLASS for a language name. Nothing is instantiated.

    Raises:
        UnknownLanguageError: If the name is not registered
    """
    key = name.lower()
    cls = _CLASS_BY_NAME.get(key)
    if cls:
        return cls
    spec = _LAZY_BY_NAME.get(key)
    if spec is None:
        raise UnknownLanguageError(name, list_languages())
    return _load_from_spec(spec)


def get_classifier(name: str) -> Classifier:
    """Instantiate the classifier registered under a language name."""
    return get_classifier_class(name)()


def language_for_path(path: Path) -> Optional[str]:
    """Language name for a file extension, or None if unknown."""
    return _NAME_BY_EXT.get(path.suffix.lower())


def list_languages() -> List[str]:
    """All registered language names, sorted."""
    return sorted(_LAZY_BY_NAME.keys())
