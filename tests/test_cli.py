import io
import sys

import pytest

from clipbal.cli import main

from .conftest import jload, run_cli


def test_balance_literal_argument(capsys):
    assert main(["balance", "foo(bar))"]) == 0
    assert capsys.readouterr().out == "foo(bar)"


def test_balance_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("(a (b) c"))
    assert main(["balance"]) == 0
    assert capsys.readouterr().out == "a (b) c"


def test_balance_from_file_uses_extension_language(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "snippet.el"
    src.write_text('(message "(") ; (\n)', encoding="utf-8")
    assert main(["balance", f"@{src}"]) == 0
    assert capsys.readouterr().out == '(message "(") ; (\n'


def test_lang_flag_wins_over_extension(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "snippet.el"
    src.write_text('"("', encoding="utf-8")
    assert main(["balance", "--lang", "plain", f"@{src}"]) == 0
    assert capsys.readouterr().out == '""'


def test_report_json(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["report", "--lang", "c-style", 'x) ")"']) == 0
    data = jload(capsys.readouterr().out)
    assert data["balanced"] == 'x ")"'
    assert data["removedOffsets"] == [1]
    assert data["language"] == "c-style"
    assert data["classes"][0]["count"] == -1


def test_config_file_option(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    cfg = tmp_path / "custom.yaml"
    cfg.write_text("language: hash\n", encoding="utf-8")
    assert main(["balance", "--config", str(cfg), "x]  # ["]) == 0
    assert capsys.readouterr().out == "x  # ["


def test_list_languages(capsys):
    assert main(["list", "languages"]) == 0
    data = jload(capsys.readouterr().out)
    assert "python" in data["languages"]
    assert "plain" in data["languages"]


def test_unknown_language_exit_code(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["balance", "--lang", "cobol", "x"]) == 2
    assert "Unknown language 'cobol'" in capsys.readouterr().err


def test_missing_source_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["balance", "@missing.txt"]) == 2
    assert "Source file not found" in capsys.readouterr().err


def test_bad_config_exit_code(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".clipbal.yaml").write_text("escape_char: xyz\n", encoding="utf-8")
    assert main(["balance", "x"]) == 2
    assert "escape_char" in capsys.readouterr().err


def test_missing_subcommand_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_module_entry_point(tmp_path):
    cp = run_cli(tmp_path, "balance", stdin="{[x]")
    assert cp.returncode == 0, cp.stderr
    assert cp.stdout == "[x]"
