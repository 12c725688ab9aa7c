import builtins

import pytest

from function_drawer.cli import main


def test_parse_and_simplify(capsys):
    assert main(["X+0", "-q"]) == 0
    out = capsys.readouterr().out
    assert "Postfix:    X 0 +" in out
    assert "Parsed:     (X+0)" in out
    assert "Simplified: X" in out


def test_no_simplify(capsys):
    assert main(["--no-simplify", "-q", "2+3"]) == 0
    out = capsys.readouterr().out
    assert "Parsed:     (2+3)" in out
    assert "Simplified" not in out


def test_errors_give_exit_code_one(capsys):
    assert main(["5/0", "-q"]) == 1
    assert "Division by zero" in capsys.readouterr().err
    assert main(["sin(X", "-q"]) == 1
    assert main(["log(X)", "-q"]) == 1


def test_plot_to_file(tmp_path, capsys):
    output = tmp_path / "out.png"
    assert main(["sin(X)*X", "-q", "--max-x", "6", "--samples", "50", "--output", str(output)]) == 0
    assert output.exists()


def test_config_file(tmp_path, capsys):
    config = tmp_path / "drawer.json"
    config.write_text('{"simplify": false, "samples": 20}')
    assert main(["X*1", "-q", "--config", str(config)]) == 0
    assert "Simplified" not in capsys.readouterr().out


def test_config_file_with_excessive_depth_is_rejected(tmp_path, capsys):
    config = tmp_path / "drawer.json"
    config.write_text('{"max_depth": 2000}')
    with pytest.raises(SystemExit) as excinfo:
        main(["sin(X)", "-q", "--config", str(config)])
    assert excinfo.value.code == 2
    assert "max_depth" in capsys.readouterr().err


def test_interactive_prompt(monkeypatch, capsys):
    answers = iter(["wide", "5", "3", "X^2"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main(["-q"]) == 0
    out = capsys.readouterr().out
    assert "Invalid value: 'wide'" in out
    assert "Parsed:     (X^2)" in out
