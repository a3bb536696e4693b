from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .balance import balance, balance_report
from .config import build_classifier, load_config
from .errors import CBUserError, SourceReadError
from .lexical import language_for_path, list_languages
from .version import tool_version

_LOG = logging.getLogger("clipbal")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("CLIPBAL_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="clipbal",
        description="Clipboard Balancer (trim unmatched delimiters from copied text)",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Shared arguments for balance/report
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "source",
            nargs="?",
            default="-",
            metavar="TEXT|@FILE|-",
            help="text to balance: a literal string, @file to read a file, or - for stdin (default)",
        )
        sp.add_argument(
            "--lang",
            help=f"lexical language ({', '.join(list_languages())})",
        )
        sp.add_argument(
            "--config",
            type=Path,
            help="config file (default: ./.clipbal.yaml if present)",
        )

    sp_balance = sub.add_parser("balance", help="Balanced text only (not JSON)")
    add_common(sp_balance)

    sp_report = sub.add_parser("report", help="JSON report: counts and deletions per class")
    add_common(sp_report)

    sp_list = sub.add_parser("list", help="Lists of entities (JSON)")
    sp_list.add_argument("what", choices=["languages"], help="what to list")

    return p


@dataclass(frozen=True)
class _Source:
    text: str
    path: Optional[Path] = None


def _read_source(arg: str) -> _Source:
    """
    Resolve the text source argument.

    Three formats are supported:
    - Literal string: "(foo"
    - From file: @path/to/file.txt
    - From stdin: -
    """
    if arg == "-":
        return _Source(sys.stdin.read())

    if arg.startswith("@"):
        file_path = Path(arg[1:])
        if not file_path.is_file():
            raise SourceReadError(f"Source file not found: {file_path}")
        try:
            return _Source(file_path.read_text(encoding="utf-8"), file_path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Failed to read source file {file_path}: {e}") from e

    return _Source(arg)


def _classifier_for(ns: argparse.Namespace, source: _Source):
    cfg = load_config(ns.config)
    lang = ns.lang
    if lang is None and cfg.style is None and cfg.language is None and source.path is not None:
        lang = language_for_path(source.path)
    _LOG.debug("language: %s", lang or cfg.language or ("custom style" if cfg.style else "plain"))
    return build_classifier(cfg, lang)


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "balance":
            source = _read_source(ns.source)
            sys.stdout.write(balance(source.text, _classifier_for(ns, source)))
            return 0

        if ns.cmd == "report":
            source = _read_source(ns.source)
            report = balance_report(source.text, _classifier_for(ns, source))
            sys.stdout.write(json.dumps(report.model_dump(mode="json", by_alias=True), ensure_ascii=False, indent=2))
            return 0

        if ns.cmd == "list":
            data: Dict[str, Any]
            if ns.what == "languages":
                data = {"languages": list_languages()}
            else:
                raise ValueError(f"Unknown list target: {ns.what}")
            sys.stdout.write(json.dumps(data, ensure_ascii=False, indent=2))
            return 0

    except CBUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
