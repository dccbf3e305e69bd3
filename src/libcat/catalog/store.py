# ABOUTME: In-memory book collection backed by a delimited text file.
# ABOUTME: Enforces ISBN uniqueness and the issue/return state machine, rewriting the file on every change.

import logging
import os
import stat
import tempfile
from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path

from libcat.audit.sinks import ErrorSink, TransactionSink
from libcat.catalog.codec import HEADER, decode_record, encode_record
from libcat.catalog.errors import (
    ConflictError,
    FormatError,
    InvalidStateError,
    NotFoundError,
    StoreIOError,
    ValidationError,
)
from libcat.catalog.types import BookRecord, BookStatus

logger = logging.getLogger(__name__)


class BookStore:
    """Owns the catalog's records and their persisted form.

    The backing file is read once at construction. Every successful
    mutation rewrites it in full, header first, records in insertion order.
    If that rewrite fails the in-memory change is kept and StoreIOError is
    raised, so memory and disk can diverge until the next successful write.
    """

    def __init__(
        self,
        books_path: Path,
        *,
        transactions: TransactionSink | None = None,
        errors: ErrorSink | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._path = books_path
        self._transactions = transactions
        self._errors = errors
        self._clock = clock or datetime.now
        self._books: list[BookRecord] = []
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[BookRecord]:
        return iter(self._books)

    def list_books(self) -> list[BookRecord]:
        """Return all records in insertion order."""
        return list(self._books)

    def add_book(self, title: str, author: str, isbn: str) -> None:
        """Catalog a new book as Available.

        Raises:
            ValidationError: If title, author, or ISBN is empty.
            ConflictError: If a book with this ISBN is already cataloged.
            StoreIOError: If the books file cannot be rewritten.
        """
        if not title or not author or not isbn:
            raise ValidationError("Title, Author, and ISBN are required")

        if self.find_book(isbn) is not None:
            raise ConflictError(f"A book with ISBN {isbn} already exists")

        self._books.append(BookRecord(title=title, author=author, isbn=isbn))
        self._persist()
        logger.debug("Added %s (%s)", isbn, title)

    def find_book(self, isbn: str) -> BookRecord | None:
        """Return the first record with this exact ISBN, or None.

        The returned record is the store's own instance, not a copy.
        """
        for book in self._books:
            if book.isbn == isbn:
                return book
        return None

    def issue_book(self, isbn: str, borrower: str) -> BookRecord:
        """Lend an Available book to a borrower.

        Returns:
            The updated record.

        Raises:
            ValidationError: If borrower is empty.
            NotFoundError: If no book has this ISBN.
            InvalidStateError: If the book is not Available.
            StoreIOError: If the books file cannot be rewritten. The book
                stays Issued in memory and no transaction is logged.
            AuditLogError: If the transaction log cannot be written. The
                issue is already saved to the books file.
        """
        if not borrower:
            raise ValidationError("Borrower name is required")

        book = self._require(isbn)
        if book.status is not BookStatus.AVAILABLE:
            raise InvalidStateError(
                f"Book {isbn} is not available for issue (status: {book.status.value})"
            )

        issued_at = self._clock()
        book.status = BookStatus.ISSUED
        book.last_issued_date = issued_at
        book.current_borrower = borrower
        self._persist()

        if self._transactions is not None:
            self._transactions.notify_issue(book.isbn, book.title, borrower, issued_at)
        return book

    def return_book(self, isbn: str) -> BookRecord:
        """Take an Issued book back into circulation.

        Returns:
            The updated record.

        Raises:
            NotFoundError: If no book has this ISBN.
            InvalidStateError: If the book is not Issued.
            StoreIOError: If the books file cannot be rewritten. The book
                stays Available in memory and no transaction is logged.
            AuditLogError: If the transaction log cannot be written. The
                return is already saved to the books file.
        """
        book = self._require(isbn)
        if book.status is not BookStatus.ISSUED:
            raise InvalidStateError(
                f"Book {isbn} is not issued (status: {book.status.value})"
            )

        borrower = book.current_borrower
        book.status = BookStatus.AVAILABLE
        book.current_borrower = ""
        self._persist()
        logger.debug("Returned %s from %s", isbn, borrower or "unknown borrower")

        if self._transactions is not None:
            self._transactions.notify_return(book.isbn, book.title, self._clock())
        return book

    def _require(self, isbn: str) -> BookRecord:
        book = self.find_book(isbn)
        if book is None:
            raise NotFoundError(f"Book {isbn} not found")
        return book

    def _load(self) -> None:
        """Read the books file, skipping the header and any undecodable lines.

        Raises:
            StoreIOError: If the file exists but cannot be read.
        """
        if not self._path.exists():
            logger.debug("No books file at %s, starting empty", self._path)
            return

        # Undecodable bytes become U+FFFD; only \n, \r and \r\n end a line
        try:
            with open(self._path, encoding="utf-8", errors="replace") as f:
                lines = f.read().split("\n")
        except OSError as exc:
            raise StoreIOError(f"Error loading books from {self._path}") from exc

        skipped = 0
        for line in lines[1:]:
            if not line.strip():
                continue
            try:
                self._books.append(decode_record(line))
            except FormatError as exc:
                skipped += 1
                logger.warning("Skipping malformed line %r: %s", line, exc)
                self._report_parse_failure(line, exc)

        logger.debug(
            "Loaded %d book(s) from %s, skipped %d", len(self._books), self._path, skipped
        )

    def _report_parse_failure(self, line: str, error: FormatError) -> None:
        if self._errors is None:
            return
        try:
            self._errors.record_parse_failure(line, error)
        except StoreIOError as exc:
            logger.warning("Could not record parse failure: %s", exc)

    def _persist(self) -> None:
        """Rewrite the whole books file from the in-memory collection.

        Writes to a temporary file in the same directory, then replaces the
        target, so a failed write leaves the previous file intact.

        Raises:
            StoreIOError: On any underlying I/O failure.
        """
        lines = [HEADER, *(encode_record(book) for book in self._books)]
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write("\n".join(lines) + "\n")
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            raise StoreIOError(f"Error saving books to {self._path}") from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Saved %d book(s) to %s", len(self._books), self._path)

    def _file_mode(self) -> int:
        """Permission bits for the rewritten books file.

        An existing file keeps its mode; a new one gets the umask default
        rather than mkstemp's 0600.
        """
        try:
            return stat.S_IMODE(os.stat(self._path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
