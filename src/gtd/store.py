"""TOML persistence for the File root."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import ValidationError

from .errors import ErrorKind, GtdError
from .logging_utils import log_event
from .models import File


def parse_file(text: str) -> File:
    """Decode a TOML document into a File.

    Raises GtdError(STORAGE) for malformed TOML or a document that does not
    match the model.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise GtdError(ErrorKind.STORAGE, f"Invalid TOML in data file: {e}") from e

    try:
        return File.model_validate(data)
    except ValidationError as e:
        raise GtdError(ErrorKind.STORAGE, f"Invalid data file structure: {e}") from e


def load_file(path: Path) -> File:
    """Load a File from ``path``. Returns an empty File if the path does not exist."""
    if not path.exists():
        log_event("file_loaded", path=path, lists=0, created=True)
        return File()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GtdError(ErrorKind.STORAGE, f"Failed to read data file: {path}: {e}") from e

    gtd_file = parse_file(text)
    log_event("file_loaded", path=path, lists=len(gtd_file.lists), created=False)
    return gtd_file


def save_file(gtd_file: File, path: Path) -> None:
    """Write ``gtd_file`` to ``path``, creating parent directories if needed.

    Write failures propagate unchanged.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    gtd_file.write_to_file(path)
    log_event("file_saved", path=path, lists=len(gtd_file.lists))
