from pathlib import Path

import pytest

from seaside.cli import parse_args
from seaside.config import SEASIDE_VERSION


def test_run_with_directory():
    args = parse_args(["run", "project"])
    assert args.command == "run"
    assert args.directory == Path("project")
    assert args.config is None


def test_config_option():
    args = parse_args(["--config", "custom.toml", "run", "project"])
    assert args.config == Path("custom.toml")
    assert args.directory == Path("project")


def test_exe_path_command():
    args = parse_args(["exe-path"])
    assert args.command == "exe-path"


def test_experiment_command():
    args = parse_args(["experiment"])
    assert args.command == "experiment"


def test_subcommand_required():
    with pytest.raises(SystemExit) as info:
        parse_args([])
    assert info.value.code == 2


def test_run_requires_directory():
    with pytest.raises(SystemExit) as info:
        parse_args(["run"])
    assert info.value.code == 2


def test_unknown_command():
    with pytest.raises(SystemExit) as info:
        parse_args(["fly"])
    assert info.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--version"])
    assert info.value.code == 0
    assert SEASIDE_VERSION in capsys.readouterr().out