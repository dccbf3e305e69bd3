# ABOUTME: Shared pytest fixtures for libcat tests.
# ABOUTME: Provides temporary books files, recording sinks, and a pinned clock.

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import pytest

from libcat.catalog.codec import HEADER
from libcat.catalog.store import BookStore

FIXED_NOW = datetime(2024, 5, 1, 10, 30, 0)


@dataclass
class RecordingTransactions:
    """TransactionSink double that keeps every event in memory."""

    issues: list[tuple[str, str, str, datetime]] = field(default_factory=list)
    returns: list[tuple[str, str, datetime]] = field(default_factory=list)

    def notify_issue(
        self, isbn: str, title: str, borrower: str, timestamp: datetime
    ) -> None:
        self.issues.append((isbn, title, borrower, timestamp))

    def notify_return(self, isbn: str, title: str, timestamp: datetime) -> None:
        self.returns.append((isbn, title, timestamp))


@dataclass
class RecordingErrors:
    """ErrorSink double that keeps every rejected line in memory."""

    failures: list[tuple[str, Exception]] = field(default_factory=list)

    def record_parse_failure(self, line: str, error: Exception) -> None:
        self.failures.append((line, error))


@pytest.fixture
def books_file(tmp_path: Path) -> Path:
    """Path for a books file that does not exist yet."""
    return tmp_path / "data" / "books.csv"


@pytest.fixture
def transactions() -> RecordingTransactions:
    return RecordingTransactions()


@pytest.fixture
def errors() -> RecordingErrors:
    return RecordingErrors()


@pytest.fixture
def store(
    books_file: Path, transactions: RecordingTransactions, errors: RecordingErrors
) -> BookStore:
    """An empty BookStore with recording sinks and a pinned clock."""
    return BookStore(
        books_file, transactions=transactions, errors=errors, clock=lambda: FIXED_NOW
    )


@pytest.fixture
def seeded_books_file(tmp_path: Path) -> Path:
    """A books file with three well-formed rows and two malformed ones.

    Layout:
        header
        Dune            Available  never issued
        bad row         (too few fields)
        Neuromancer     Issued     2024-04-02 09:15:00
        bad status      (status 'Borrowed')
        Solaris         Lost       2023-12-24 18:00:00
    """
    path = tmp_path / "seeded" / "books.csv"
    path.parent.mkdir(parents=True)
    path.write_text(
        "\n".join([
            HEADER,
            "Dune,Frank Herbert,978-1,Available,0001-01-01 00:00:00",
            "Broken,Nobody",
            "Neuromancer,William Gibson,978-2,Issued,2024-04-02 09:15:00",
            "Odd,Someone,978-9,Borrowed,2024-01-01 00:00:00",
            "Solaris,Stanislaw Lem,978-3,Lost,2023-12-24 18:00:00",
        ]) + "\n",
        encoding="utf-8",
    )
    return path
