"""
Tests for tablaverdad/cli.py.
"""

import builtins
import json

import pytest

from tablaverdad import cli
from tablaverdad.logic.parser import MAX_NESTING


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("TABLAVERDAD_MAX_INPUT", "TABLAVERDAD_LOG_LEVEL", "TABLAVERDAD_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    # no .env from the working tree
    monkeypatch.chdir(tmp_path)


def feed_input(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


class TestMain:
    def test_table_output(self, capsys):
        assert cli.main(["p ∨ ¬p"]) == 0
        assert "Tautología" in capsys.readouterr().out

    def test_json_to_file(self, tmp_path):
        out = tmp_path / "tabla.json"
        assert cli.main(["p ∧ q", "--formato", "json", "--salida", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["variables"] == ["p", "q"]
        assert data["rows"][-1] == [1, 1, 1]
        assert data["verdict"] == "Indeterminación"

    def test_html_to_file(self, tmp_path):
        out = tmp_path / "tabla.html"
        assert cli.main(["p ∧ ¬p", "--formato", "html", "--salida", str(out)]) == 0
        assert "<strong>Resultado: Contradicción</strong>" in out.read_text(encoding="utf-8")

    def test_format_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TABLAVERDAD_FORMAT", "json")
        out = tmp_path / "out.txt"
        assert cli.main(["p", "--salida", str(out)]) == 0
        assert json.loads(out.read_text(encoding="utf-8"))["rows"] == [[0, 0], [1, 1]]

    def test_tree(self, capsys):
        assert cli.main(["p → q → r", "--arbol"]) == 0
        assert "(p → (q → r))" in capsys.readouterr().out

    def test_tree_syntax_error(self, capsys):
        assert cli.main(["(p ∧ q", "--arbol"]) == 0
        out = capsys.readouterr().out
        assert "expected closing parenthesis" in out
        assert "Contradicción" in out

    def test_input_too_long(self, capsys, tmp_path):
        config = tmp_path / "cfg.json"
        config.write_text(json.dumps({"max_input_length": 5}), encoding="utf-8")
        assert cli.main(["p ∧ q ∧ r", "--config", str(config)]) == 1
        assert "demasiado larga" in capsys.readouterr().out

    def test_invalid_config(self, capsys, tmp_path):
        config = tmp_path / "cfg.json"
        config.write_text(json.dumps({"output_format": "xml"}), encoding="utf-8")
        assert cli.main(["p", "--config", str(config)]) == 2
        assert "Configuración inválida" in capsys.readouterr().out

    def test_invalid_log_level_type(self, capsys, tmp_path):
        config = tmp_path / "cfg.json"
        config.write_text(json.dumps({"log_level": 10}), encoding="utf-8")
        assert cli.main(["p", "--config", str(config)]) == 2
        assert "log_level desconocido" in capsys.readouterr().out

    def test_nesting_too_deep(self, capsys):
        text = "(" * 200 + "p" + ")" * 200
        assert cli.main([text]) == 1
        assert "demasiado anidada" in capsys.readouterr().out

    def test_tree_at_nesting_limit(self, capsys):
        text = "(" * MAX_NESTING + "p" + ")" * MAX_NESTING
        assert cli.main([text, "--arbol"]) == 0
        out = capsys.readouterr().out
        assert "Árbol: p" in out
        assert "Indeterminación" in out

    def test_tree_recursion_error(self, capsys, monkeypatch):
        def too_deep(text):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(cli, "parse_formula", too_deep)
        assert cli.main(["p ∧ q", "--arbol"]) == 0
        out = capsys.readouterr().out
        assert "demasiado profunda" in out
        assert "Indeterminación" in out

    def test_no_expression(self, capsys):
        assert cli.main([]) == 1


class TestInteractive:
    def test_palette_builds_expression(self, monkeypatch, tmp_path):
        feed_input(monkeypatch, [":p", ":o", ":no", ":p", "", "salir"])
        captured = []
        monkeypatch.setattr(cli, "run_expression", lambda expr, fmt, tree=False: captured.append(expr))
        assert cli.main(["--interactivo"]) == 0
        assert captured == ["p∨¬p"]

    def test_clear_discards_buffer(self, monkeypatch):
        feed_input(monkeypatch, [":p", ":y", ":limpiar", ":q", ""])
        captured = []
        monkeypatch.setattr(cli, "run_expression", lambda expr, fmt, tree=False: captured.append(expr))
        assert cli.main(["--interactivo"]) == 0
        assert captured == ["q"]

    def test_typed_expression(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["p ∧ ¬p", "exit"])
        assert cli.main(["--interactivo"]) == 0
        assert "Contradicción" in capsys.readouterr().out
