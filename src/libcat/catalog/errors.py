# ABOUTME: Exception taxonomy for catalog operations.
# ABOUTME: Every error the store, codec, or sinks raise derives from CatalogError.


class CatalogError(Exception):
    """Base class for all catalog failures."""


class ValidationError(CatalogError):
    """Raised when a required field (title, author, ISBN, borrower) is empty."""


class ConflictError(CatalogError):
    """Raised when adding a book whose ISBN is already cataloged."""


class NotFoundError(CatalogError):
    """Raised when no book matches the requested ISBN."""


class InvalidStateError(CatalogError):
    """Raised when an operation is not legal for the book's current status."""


class FormatError(CatalogError):
    """Raised when a persisted line cannot be decoded into a BookRecord."""


class StoreIOError(CatalogError):
    """Raised when a backing file cannot be read or written.

    Always chained from the underlying OSError.
    """


class AuditLogError(StoreIOError):
    """Raised when a transaction or parse-error log cannot be written or read.

    When raised from issue or return, the books file has already been saved.
    """
