# ABOUTME: Core data structures for catalog entries.
# ABOUTME: BookRecord holds a book's identity and circulation status.

import enum
from dataclasses import dataclass
from datetime import datetime

from libcat.catalog.errors import ValidationError

NEVER_ISSUED = datetime.min


class BookStatus(enum.Enum):
    """Circulation status of a book. The value is the name written to disk."""

    AVAILABLE = "Available"
    ISSUED = "Issued"
    LOST = "Lost"


@dataclass
class BookRecord:
    """One catalog entry for a physical book.

    ``last_issued_date`` is only meaningful once the book has been issued;
    until then it holds the ``NEVER_ISSUED`` sentinel. ``current_borrower``
    is non-empty only while the book is issued.
    """

    title: str
    author: str
    isbn: str
    status: BookStatus = BookStatus.AVAILABLE
    last_issued_date: datetime = NEVER_ISSUED
    current_borrower: str = ""

    def __setattr__(self, name: str, value: object) -> None:
        if name == "isbn" and not value:
            raise ValidationError("ISBN cannot be empty")
        super().__setattr__(name, value)

    @property
    def is_available(self) -> bool:
        """Whether the book can be issued."""
        return self.status is BookStatus.AVAILABLE

    @property
    def has_been_issued(self) -> bool:
        return self.last_issued_date != NEVER_ISSUED

    def __str__(self) -> str:
        return (
            f"Title: {self.title}, Author: {self.author}, "
            f"ISBN: {self.isbn}, Status: {self.status.value}"
        )
