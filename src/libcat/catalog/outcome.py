# ABOUTME: Tagged-result view of catalog operations.
# ABOUTME: Converts CatalogError subclasses into an Outcome carrying an ErrorKind.

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from libcat.catalog.errors import (
    CatalogError,
    ConflictError,
    FormatError,
    InvalidStateError,
    NotFoundError,
    StoreIOError,
    ValidationError,
)


class ErrorKind(enum.Enum):
    """Which part of the error taxonomy an operation failed with."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    FORMAT = "format"
    STORE_IO = "store_io"


_KIND_BY_ERROR: dict[type[CatalogError], ErrorKind] = {
    ValidationError: ErrorKind.VALIDATION,
    ConflictError: ErrorKind.CONFLICT,
    NotFoundError: ErrorKind.NOT_FOUND,
    InvalidStateError: ErrorKind.INVALID_STATE,
    FormatError: ErrorKind.FORMAT,
    StoreIOError: ErrorKind.STORE_IO,
}


@dataclass
class Outcome:
    """Result of a catalog operation: a value on success, an error kind otherwise."""

    value: Any = None
    error_kind: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def error_kind_of(exc: CatalogError) -> ErrorKind:
    """Map an exception to its ErrorKind, honouring subclasses."""
    for error_type in type(exc).__mro__:
        kind = _KIND_BY_ERROR.get(error_type)  # type: ignore[arg-type]
        if kind is not None:
            return kind
    raise TypeError(f"{type(exc).__name__} has no ErrorKind")


def attempt(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Run a catalog operation and capture its result as an Outcome.

    Only CatalogError is converted; anything else propagates.
    """
    try:
        value = operation(*args, **kwargs)
    except CatalogError as exc:
        return Outcome(error_kind=error_kind_of(exc), message=str(exc))
    return Outcome(value=value)
