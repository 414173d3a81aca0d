import io
import os

import pytest

from minishell.builtins import (
    cd,
    env_command,
    exit_shell,
    export,
    export_listing,
    pwd,
    run_builtin,
    unset,
)
from minishell.environment import Environment


@pytest.fixture
def environment():
    return Environment.from_strings(["A=1", "B=2"])


def test_pwd_prints_cwd():
    out = io.StringIO()
    pwd(["pwd"], out)
    assert out.getvalue() == os.getcwd() + "\n"


def test_pwd_rejects_arguments():
    out = io.StringIO()
    pwd(["pwd", "x"], out)
    assert out.getvalue() == "pwd: too many arguments\n"


def test_env_lists_oldest_first(environment):
    out = io.StringIO()
    env_command(["env"], environment, out)
    assert out.getvalue().splitlines() == ["A=1", "B=2"]


def test_env_with_argument_reports_error(environment):
    out = io.StringIO()
    env_command(["env", "foo"], environment, out)
    assert "No such file or directory" in out.getvalue()
    assert "foo" in out.getvalue()


def test_export_listing_format(environment):
    out = io.StringIO()
    export_listing(["export"], environment, out)
    lines = out.getvalue().splitlines()
    assert lines == ["declare -x " + value for value in environment.ordered()]


def test_export_without_arguments_lists(environment):
    listed = io.StringIO()
    export(["export"], environment, listed)
    expected = io.StringIO()
    export_listing(["export"], environment, expected)
    assert listed.getvalue() == expected.getvalue()


def test_export_adds_new_entry(environment):
    out = io.StringIO()
    export(["export", "NEW=abc"], environment, out)
    assert "NEW=abc" in environment.ordered()
    assert environment.lookup("NEW") == "abc"
    assert len(environment) == 3


def test_export_replaces_existing(environment):
    out = io.StringIO()
    export(["export", "A=9"], environment, out)
    assert out.getvalue() == "existe\n" * 2
    assert environment.lookup("A") == "9"
    assert len(environment) == 2


def test_export_without_equals(environment):
    out = io.StringIO()
    export(["export", "NAME"], environment, out)
    assert out.getvalue() == "No\n"
    assert len(environment) == 2


def test_unset_removes_entry(environment):
    out = io.StringIO()
    unset(["unset", "A"], environment, out)
    assert out.getvalue().startswith("existe indice: ")
    assert environment.ordered() == ["B=2"]


def test_unset_without_arguments_keeps_entries(environment):
    before = environment.ordered()
    unset(["unset"], environment, io.StringIO())
    assert environment.ordered() == before


def test_cd_to_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path.parent)
    cd(["cd", str(tmp_path)], io.StringIO())
    assert os.path.realpath(os.getcwd()) == os.path.realpath(tmp_path)


def test_cd_missing_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    missing = str(tmp_path / "missing")
    out = io.StringIO()
    cd(["cd", missing], out)
    assert out.getvalue() == f"cd: string not in {missing}\n"
    assert os.path.realpath(os.getcwd()) == os.path.realpath(tmp_path)


def test_cd_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path.parent)
    monkeypatch.setenv("HOME", str(tmp_path))
    out = io.StringIO()
    cd(["cd"], out)
    assert out.getvalue() == ""
    assert os.path.realpath(os.getcwd()) == os.path.realpath(tmp_path)


def test_exit_raises_system_exit():
    with pytest.raises(SystemExit) as info:
        exit_shell(["exit"], io.StringIO())
    assert info.value.code == 1


def test_run_builtin_unknown_command(environment):
    out = io.StringIO()
    assert run_builtin(["ls"], environment, out) is False
    assert out.getvalue() == ""


def test_run_builtin_empty(environment):
    assert run_builtin([], environment, io.StringIO()) is False


def test_run_builtin_pwd(environment):
    out = io.StringIO()
    assert run_builtin(["pwd"], environment, out) is True
    assert out.getvalue() == os.getcwd() + "\n"


def test_run_builtin_echo_dash_n_alone(environment):
    out = io.StringIO()
    assert run_builtin(["echo", "-n"], environment, out) is True
    assert out.getvalue() == ""


def test_run_builtin_echo(environment):
    out = io.StringIO()
    assert run_builtin(["echo", "$B"], environment, out) is True
    assert out.getvalue().rstrip("\n") == "2"


def test_run_builtin_export_and_unset(environment):
    out = io.StringIO()
    assert run_builtin(["export", "C=3"], environment, out) is True
    assert environment.lookup("C") == "3"
    assert run_builtin(["unset", "C"], environment, out) is True
    assert environment.lookup("C") == ""