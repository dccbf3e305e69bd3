# ABOUTME: Append-only plain-text log of issue and return events.
# ABOUTME: Implements TransactionSink and reads the log back for display.

from datetime import datetime
from pathlib import Path

from libcat.catalog.codec import format_timestamp
from libcat.catalog.errors import AuditLogError


class TransactionLog:
    """Writes one line per circulation event to a text file.

    Line formats::

        [2024-05-01 10:00:00] ISSUED: ISBN: 978-1, Title: Dune, Borrowed By: Alice
        [2024-05-03 09:30:00] RETURNED: ISBN: 978-1, Title: Dune
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def notify_issue(
        self, isbn: str, title: str, borrower: str, timestamp: datetime
    ) -> None:
        self._append(
            f"[{format_timestamp(timestamp)}] ISSUED: "
            f"ISBN: {isbn}, Title: {title}, Borrowed By: {borrower}"
        )

    def notify_return(self, isbn: str, title: str, timestamp: datetime) -> None:
        self._append(
            f"[{format_timestamp(timestamp)}] RETURNED: ISBN: {isbn}, Title: {title}"
        )

    def entries(self) -> list[str]:
        """Return every logged line, oldest first.

        A log that has never been written reads as empty.

        Raises:
            AuditLogError: If the log exists but cannot be read.
        """
        if not self._path.exists():
            return []
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise AuditLogError(f"Error reading transaction log {self._path}") from exc
        return [line for line in text.split("\n") if line]

    def _append(self, message: str) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(message + "\n")
        except OSError as exc:
            raise AuditLogError(f"Error writing transaction log {self._path}") from exc
