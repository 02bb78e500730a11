import subprocess
from unittest import mock

import pytest

from atnrt import codegen


def _done(code=0):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_command_line(tmp_path, monkeypatch):
    (tmp_path / "grammars").mkdir()
    monkeypatch.chdir(tmp_path)
    with mock.patch("subprocess.run", return_value=_done()) as run:
        code = codegen.gen_for_grammar("CSV", "tool.jar", "-visitor")
    assert code == 0
    command = run.call_args.args[0]
    assert command[:4] == ["java", "-cp", "tool.jar", "org.antlr.v4.Tool"]
    assert command[-3:] == ["../tests/gen", "CSV.g4", "-visitor"]
    assert run.call_args.kwargs["cwd"] == tmp_path / "grammars"


def test_no_additional_arg(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("subprocess.run", return_value=_done()) as run:
        code = codegen.gen_for_grammar("Labels", "tool.jar", None)
    assert code == 0
    assert run.call_args.args[0][-1] == "Labels.g4"


def test_exit_code_returned(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("subprocess.run", return_value=_done(3)):
        assert codegen.gen_for_grammar("CSV", "tool.jar", None) == 3


def test_start_failure_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("java")):
        with pytest.raises(RuntimeError, match="antlr tool failed to start"):
            codegen.gen_for_grammar("CSV", "tool.jar", None)


def test_main_default_grammars_pair_with_args(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("subprocess.run", return_value=_done()) as run:
        assert codegen.main([]) == 0
    names = [c.args[0][7] for c in run.call_args_list]
    expected = [f"{g}.g4" for g, _ in zip(codegen.DEFAULT_GRAMMARS, codegen.DEFAULT_ADDITIONAL_ARGS)]
    assert names == expected
    assert "FHIRPath.g4" not in names
    assert run.call_args_list[0].args[0][-1] == "-visitor"


def test_main_ignores_failed_runs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("subprocess.run", return_value=_done(1)) as run:
        assert codegen.main(["Foo", "Bar", "--antlr-path", "other.jar"]) == 0
    assert run.call_count == 2
    assert all(c.args[0][2] == "other.jar" for c in run.call_args_list)