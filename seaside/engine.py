"""Locating the config file and the assembled files of a project."""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from seaside.config import Config, load_config
from seaside.errors import ErrorKind, SeasideError

CONFIG_FILE_NAME = "Seaside.toml"


@dataclass(frozen=True)
class ProjectFiles:
    """Paths of the segment files found in a project directory."""

    text: Path
    extern: Path | None = None
    data: Path | None = None
    ktext: Path | None = None
    kdata: Path | None = None


def find_seaside_toml() -> Path:
    """Find the config in the working directory, else in seaside's root directory."""
    path = Path(CONFIG_FILE_NAME)
    if path.exists():
        return path
    parents = Path(__file__).resolve().parents
    if len(parents) < 2:
        raise SeasideError(ErrorKind.NOT_FOUND, "couldn't find seaside's root directory")
    candidate = parents[1] / CONFIG_FILE_NAME
    if candidate.exists():
        return candidate
    raise SeasideError(ErrorKind.NOT_FOUND, "couldn't find `Seaside.toml`")


def get_config(config_path: str | PathLike[str] | None = None) -> Config:
    """Load and validate the config, searching for it when no path is given."""
    path = Path(config_path) if config_path is not None else find_seaside_toml()
    config = load_config(path)
    config.validate()
    return config


def _existing(directory: Path, name: str) -> Path | None:
    path = directory / name
    return path if path.exists() else None


def locate_project_files(config: Config, directory: str | PathLike[str]) -> ProjectFiles:
    """Find the segment files of a project, entering it first if the config says so."""
    directory = Path(directory)
    if not directory.is_dir():
        raise SeasideError(
            ErrorKind.INVALID_PROJECT_DIRECTORY, "expected project path to be a directory"
        )
    if config.project_directory_is_cwd:
        try:
            os.chdir(directory)
        except OSError:
            raise SeasideError(
                ErrorKind.EXTERNAL_FAILURE, f"failed to change the cwd to {directory}"
            ) from None
        directory = Path(".")
    text = _existing(directory, "text")
    if text is None:
        raise SeasideError(
            ErrorKind.INVALID_PROJECT_DIRECTORY, "missing 'text' file in project directory"
        )
    return ProjectFiles(
        text=text,
        extern=_existing(directory, "extern"),
        data=_existing(directory, "data"),
        ktext=_existing(directory, "ktext"),
        kdata=_existing(directory, "kdata"),
    )