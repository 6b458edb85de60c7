# app/errors.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    MALFORMED = "malformed"


class ResolveError(Exception):
    """
    Failure raised while resolving a ref.

    `status` is only set when the failure originates from an upstream HTTP
    status (or was normalized to one, e.g. 404 for unknown repositories).
    """

    def __init__(self, kind: ErrorKind, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"ResolveError(kind={self.kind.value!r}, status={self.status!r}, message={self.message!r})"
