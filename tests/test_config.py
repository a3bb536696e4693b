import textwrap
from pathlib import Path

import pytest

from clipbal import balance
from clipbal.config import BalanceConfig, ConfigLoadError, build_classifier, load_config
from clipbal.errors import UnknownLanguageError
from clipbal.lexical import PlainClassifier
from clipbal.lexical.style import LispStyleClassifier, StyleClassifier


def write(path: Path, text: str) -> Path:
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(root=tmp_path)
    assert cfg == BalanceConfig()
    assert cfg.language is None
    assert cfg.escape_char == "\\"
    assert isinstance(build_classifier(cfg), PlainClassifier)


def test_explicit_missing_path_is_error(tmp_path):
    with pytest.raises(ConfigLoadError):
        load_config(tmp_path / "nope.yaml")


def test_language_and_escape_char(tmp_path):
    write(tmp_path / ".clipbal.yaml", """
        language: Lisp
        escape_char: "?"
    """)
    cfg = load_config(root=tmp_path)
    assert cfg.language == "lisp"
    classifier = build_classifier(cfg)
    assert isinstance(classifier, LispStyleClassifier)
    assert classifier.escape_char == "?"
    assert balance("?( x)", classifier) == "?( x"


def test_explicit_language_overrides_config(tmp_path):
    cfg = load_config(write(tmp_path / "cfg.yaml", "language: lisp\n"))
    assert isinstance(build_classifier(cfg, "plain"), PlainClassifier)


def test_custom_style(tmp_path):
    write(tmp_path / ".clipbal.yaml", """
        style:
          line_comments: ["--"]
          block_comments: [["{-", "-}"]]
          quotes: ['"']
    """)
    cfg = load_config(root=tmp_path)
    classifier = build_classifier(cfg)
    assert isinstance(classifier, StyleClassifier)
    assert balance('f ")" {- ( -} -- ]\n)', classifier) == 'f ")" {- ( -} -- ]\n'


def test_custom_style_multi_char_quote(tmp_path):
    write(tmp_path / ".clipbal.yaml", '''
        style:
          quotes: ['"""', '"']
    ''')
    cfg = load_config(root=tmp_path)
    assert cfg.style.quotes == ['"""', '"']
    classifier = build_classifier(cfg)
    assert balance('x = """ ) " ( """ )', classifier) == 'x = """ ) " ( """ '


def test_unknown_language_surfaces_on_build(tmp_path):
    cfg = load_config(write(tmp_path / "cfg.yaml", "language: cobol\n"))
    with pytest.raises(UnknownLanguageError):
        build_classifier(cfg)


@pytest.mark.parametrize("body,field", [
    ("escape_char: ab\n", "escape_char"),
    ("language: 3\n", "language"),
    ("style: [1]\n", "style"),
    ("style:\n  quotes: [1]\n", "style.quotes"),
    ("style:\n  block_comments: [['/*']]\n", "style.block_comments[0]"),
    ("style:\n  colors: []\n", "style"),
    ("extra: 1\n", "<root>"),
])
def test_invalid_fields_name_the_path(tmp_path, body, field):
    path = write(tmp_path / "cfg.yaml", body)
    with pytest.raises(ConfigLoadError) as exc:
        load_config(path)
    assert f"{field}:" in str(exc.value)
    assert str(path) in str(exc.value)


def test_non_mapping_root(tmp_path):
    path = write(tmp_path / "cfg.yaml", "- a\n- b\n")
    with pytest.raises(ConfigLoadError):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = write(tmp_path / "cfg.yaml", "language: [unclosed\n")
    with pytest.raises(ConfigLoadError):
        load_config(path)
