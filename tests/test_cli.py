import json
from pathlib import Path

from propfile.cli import EXIT_LOAD_FAILED, EXIT_MISSING_KEY, EXIT_OK, main

DATA = Path(__file__).parent / "data" / "service.properties"


def test_cli_prints_sorted_table(capsys) -> None:
    assert main([str(DATA)]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out == ["debug=true", "host=localhost", "port=8080", "user=admin"]


def test_cli_prints_json(capsys) -> None:
    assert main([str(DATA), "--json"]) == EXIT_OK
    assert json.loads(capsys.readouterr().out) == {
        "host": "localhost",
        "port": "8080",
        "debug": "true",
        "user": "admin",
    }


def test_cli_single_key(capsys) -> None:
    assert main([str(DATA), "--key", "port"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "8080"


def test_cli_missing_key(capsys) -> None:
    assert main([str(DATA), "--key", "password"]) == EXIT_MISSING_KEY
    assert "password" in capsys.readouterr().err


def test_cli_missing_key_with_default(capsys) -> None:
    assert main([str(DATA), "--key", "password", "--default", "secret"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "secret"


def test_cli_missing_file(tmp_path) -> None:
    assert main([str(tmp_path / "absent.properties")]) == EXIT_LOAD_FAILED


def test_cli_uses_toml_settings(tmp_path, capsys) -> None:
    source = tmp_path / "app.properties"
    source.write_text("a = x;y\n! note = 1\n")
    config = tmp_path / "propfile.toml"
    config.write_text('[syntax]\nline_break_chars = "\\n"\ncomment_chars = "!"\n')
    assert main([str(source), "--config", str(config)]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["a=x;y"]
