"""Service-level error type and the translation applied around mutations."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    INTERNAL_SERVER = "internal_server"


_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INTERNAL_SERVER: 500,
}


class CustomError(Exception):
    """Error raised by services: a kind plus a human-readable message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]

    @classmethod
    def bad_request(cls, message: str) -> CustomError:
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def internal_server(cls, message: str = "Internal Server Error") -> CustomError:
        return cls(ErrorKind.INTERNAL_SERVER, message)

    def __repr__(self) -> str:
        return f"CustomError(kind={self.kind.value!r}, message={self.message!r})"


@contextmanager
def internal_errors(action: str, message: str | None = None) -> Iterator[None]:
    """Re-raise anything but ``CustomError`` as an internal error.

    The new error carries ``message`` when given, otherwise the string form of
    the original exception.
    """
    try:
        yield
    except CustomError:
        raise
    except Exception as exc:
        logger.exception("%s failed", action)
        raise CustomError.internal_server(message or str(exc)) from exc
