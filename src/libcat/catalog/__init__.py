# ABOUTME: Public API for the catalog layer.
# ABOUTME: Exports the book store, record types, codec, outcomes, and error taxonomy.

from libcat.catalog.codec import HEADER, decode_record, encode_record
from libcat.catalog.errors import (
    AuditLogError,
    CatalogError,
    ConflictError,
    FormatError,
    InvalidStateError,
    NotFoundError,
    StoreIOError,
    ValidationError,
)
from libcat.catalog.outcome import ErrorKind, Outcome, attempt
from libcat.catalog.store import BookStore
from libcat.catalog.types import NEVER_ISSUED, BookRecord, BookStatus

__all__ = [
    "HEADER",
    "NEVER_ISSUED",
    "AuditLogError",
    "BookRecord",
    "BookStatus",
    "BookStore",
    "CatalogError",
    "ConflictError",
    "ErrorKind",
    "FormatError",
    "InvalidStateError",
    "NotFoundError",
    "Outcome",
    "StoreIOError",
    "ValidationError",
    "attempt",
    "decode_record",
    "encode_record",
]
