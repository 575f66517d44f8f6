"""Domain semantic exceptions.

Every failure the client reports to its callers is a ``DomainError`` tagged
with one ``DomainErrorKind``. Callers branch on ``error.kind``; the set of
kinds is closed.
"""

from __future__ import annotations

from tripclient.domain.constants import (
    NETWORK_UNAVAILABLE_MESSAGE,
    NOT_FOUND_MESSAGE,
    SERVER_ERROR_MESSAGE,
    TIMEOUT_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
)
from tripclient.domain.enums import DomainErrorKind


class DomainError(Exception):
    """Base domain exception, tagged with its kind."""

    def __init__(self, kind: DomainErrorKind, message: str):
        self.kind = DomainErrorKind(kind)
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DomainError(kind={self.kind.value!r}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}

    @classmethod
    def timeout(cls, message: str = TIMEOUT_MESSAGE) -> "DomainError":
        return cls(DomainErrorKind.TIMEOUT, message)

    @classmethod
    def network_unavailable(cls, message: str = NETWORK_UNAVAILABLE_MESSAGE) -> "DomainError":
        return cls(DomainErrorKind.NETWORK_UNAVAILABLE, message)

    @classmethod
    def validation(cls, message: str) -> "DomainError":
        return cls(DomainErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str = NOT_FOUND_MESSAGE) -> "DomainError":
        return cls(DomainErrorKind.NOT_FOUND, message)

    @classmethod
    def server_error(cls, message: str = SERVER_ERROR_MESSAGE) -> "DomainError":
        return cls(DomainErrorKind.SERVER_ERROR, message)

    @classmethod
    def generic(cls, message: str = UNEXPECTED_ERROR_MESSAGE) -> "DomainError":
        return cls(DomainErrorKind.GENERIC, message)


__all__ = ["DomainError", "DomainErrorKind"]
