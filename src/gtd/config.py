"""Runtime configuration: where the data file and the log file live."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ErrorKind, GtdError

DATA_FILE_ENV = "GTD_FILE"
LOG_FILE_ENV = "GTD_LOG"
DEFAULT_DATA_FILE = "~/.gtd.toml"


@dataclass
class AppConfig:
    data_path: Path
    log_path: Path | None = None


def resolve_path(raw: str, *, base_dir: Path | None = None) -> Path:
    """Map a user-provided path to an absolute Path.

    ``~`` expands to the home directory; relative paths are joined onto
    ``base_dir`` (the current directory by default).
    """
    if not raw.strip():
        raise GtdError(ErrorKind.INVALID_INPUT, "Path must not be empty.")
    if "\0" in raw:
        raise GtdError(ErrorKind.INVALID_INPUT, "Path contains NUL (\\0) character.")

    mapped = Path(raw).expanduser()
    if not mapped.is_absolute():
        mapped = (base_dir if base_dir is not None else Path.cwd()) / mapped
    return mapped.resolve()


def load_config(
    file_arg: str | None = None,
    log_arg: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Build the config from CLI options, then environment, then defaults."""
    env = os.environ if environ is None else environ

    data_raw = file_arg if file_arg is not None else env.get(DATA_FILE_ENV) or DEFAULT_DATA_FILE
    log_raw = log_arg if log_arg is not None else env.get(LOG_FILE_ENV)

    return AppConfig(
        data_path=resolve_path(data_raw),
        log_path=resolve_path(log_raw) if log_raw else None,
    )
