from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..errors import CBUserError
from ..lexical.model import DEFAULT_ESCAPE_CHAR


class ConfigLoadError(CBUserError):
    """Invalid configuration file or field (message carries the field path)."""
    pass


def _err(path: str, msg: str) -> ConfigLoadError:
    return ConfigLoadError(f"{path}: {msg}")


def _str_list(val: Any, path: str) -> List[str]:
    if not isinstance(val, list) or not all(isinstance(x, str) and x for x in val):
        raise _err(path, f"expected list of non-empty strings, got {val!r}")
    return list(val)


@dataclass
class StyleCfg:
    """Custom lexical style: comment and quote markers."""
    line_comments: List[str]
    block_comments: List[List[str]]
    quotes: List[str]

    @staticmethod
    def from_dict(d: Dict[str, Any], path: str = "style") -> StyleCfg:
        unknown = set(d) - {"line_comments", "block_comments", "quotes"}
        if unknown:
            raise _err(path, f"unknown keys {sorted(unknown)}")

        line_comments = _str_list(d.get("line_comments", []), f"{path}.line_comments")

        block_comments: List[List[str]] = []
        raw_blocks = d.get("block_comments", [])
        if not isinstance(raw_blocks, list):
            raise _err(f"{path}.block_comments", f"expected list of [open, close] pairs, got {raw_blocks!r}")
        for i, pair in enumerate(raw_blocks):
            pair_path = f"{path}.block_comments[{i}]"
            if len(_str_list(pair, pair_path)) != 2:
                raise _err(pair_path, f"expected [open, close] pair, got {pair!r}")
            block_comments.append(list(pair))

        quotes = _str_list(d.get("quotes", []), f"{path}.quotes")

        return StyleCfg(line_comments=line_comments, block_comments=block_comments, quotes=quotes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line_comments": list(self.line_comments),
            "block_comments": [list(p) for p in self.block_comments],
            "quotes": list(self.quotes),
        }


@dataclass
class BalanceConfig:
    """Settings of a balance run."""
    language: Optional[str] = None  # Falls back to file extension, then "plain"
    escape_char: str = DEFAULT_ESCAPE_CHAR
    style: Optional[StyleCfg] = None  # Custom style wins over language

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> BalanceConfig:
        """Load configuration from YAML dictionary."""
        if not d:
            return BalanceConfig()

        unknown = set(d) - {"language", "escape_char", "style"}
        if unknown:
            raise _err("<root>", f"unknown keys {sorted(unknown)}")

        cfg = BalanceConfig()

        if "language" in d:
            language = d["language"]
            if not isinstance(language, str) or not language.strip():
                raise _err("language", f"expected non-empty string, got {language!r}")
            cfg.language = language.strip().lower()

        escape_char = d.get("escape_char", cfg.escape_char)
        if not isinstance(escape_char, str) or len(escape_char) > 1:
            raise _err("escape_char", f"expected a single character or empty string, got {escape_char!r}")
        cfg.escape_char = escape_char

        raw_style = d.get("style")
        if raw_style is not None:
            if not isinstance(raw_style, dict):
                raise _err("style", f"expected mapping, got {type(raw_style).__name__}")
            cfg.style = StyleCfg.from_dict(raw_style)

        return cfg
