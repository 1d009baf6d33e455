"""
Tests for the makefile.py task runner.
"""
import importlib.util
from pathlib import Path
from types import SimpleNamespace

import pytest

pytest.importorskip("colorama")

MAKEFILE_PATH = Path(__file__).resolve().parent.parent / "makefile.py"


@pytest.fixture
def makefile():
    spec = importlib.util.spec_from_file_location("makefile", MAKEFILE_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_targets_are_callable(makefile):
    assert set(makefile.TARGETS) == {
        "test", "test-index", "test-catalog", "install", "clean", "run", "help"}
    for func, _, _ in makefile.TARGETS.values():
        assert callable(func)


def test_run_cmd_exits_with_command_return_code(makefile, monkeypatch):
    monkeypatch.setattr(makefile.subprocess, "run",
                        lambda args: SimpleNamespace(returncode=3))

    with pytest.raises(SystemExit) as exc_info:
        makefile.run_cmd(["pytest"])

    assert exc_info.value.code == 3


def test_run_cmd_missing_command(makefile, monkeypatch, capsys):
    def missing(args):
        raise FileNotFoundError

    monkeypatch.setattr(makefile.subprocess, "run", missing)

    with pytest.raises(SystemExit) as exc_info:
        makefile.run_cmd(["no-such-tool"])

    assert exc_info.value.code == 127
    assert "Command not found: 'no-such-tool'" in capsys.readouterr().out


def test_run_cmd_success_returns_normally(makefile, monkeypatch):
    monkeypatch.setattr(makefile.subprocess, "run",
                        lambda args: SimpleNamespace(returncode=0))
    assert makefile.run_cmd(["pytest"]) is None
