"""Failure values for gtd."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_INPUT = "invalid_input"
    STORAGE = "storage"


class GtdError(Exception):
    """Base failure for gtd: a kind plus a user-facing message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def not_found(what: str) -> GtdError:
    return GtdError(ErrorKind.NOT_FOUND, f"{what} not found.")


def already_exists(what: str) -> GtdError:
    return GtdError(ErrorKind.ALREADY_EXISTS, f"{what} already exists.")
