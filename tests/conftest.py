import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from clipbal.lexical import FunctionClassifier, LexicalRole

REPO_ROOT = Path(__file__).resolve().parent.parent


def run_cli(cwd: Path, *args: str, stdin: str | None = None) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "clipbal.cli", *args],
        cwd=cwd, env=env, input=stdin, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)


def span_classifier(*spans: tuple[int, int, LexicalRole]) -> FunctionClassifier:
    """Classifier marking the given half-open [start, end) spans with a role."""
    def fn(text: str, offset: int) -> LexicalRole:
        for start, end, role in spans:
            if start <= offset < end:
                return role
        return LexicalRole.CODE
    return FunctionClassifier(fn)


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    # the debug handler must not leak into captured stderr
    monkeypatch.delenv("CLIPBAL_DEBUG", raising=False)
