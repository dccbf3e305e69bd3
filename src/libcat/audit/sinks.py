# ABOUTME: Collaborator protocols the book store reports to.
# ABOUTME: TransactionSink receives issue/return events; ErrorSink receives load-time parse failures.

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class TransactionSink(Protocol):
    """Protocol for audit logs of circulation events.

    The store calls these only after the books file was rewritten
    successfully.
    """

    def notify_issue(
        self, isbn: str, title: str, borrower: str, timestamp: datetime
    ) -> None: ...

    def notify_return(self, isbn: str, title: str, timestamp: datetime) -> None: ...


@runtime_checkable
class ErrorSink(Protocol):
    """Protocol for receiving books-file lines that could not be decoded."""

    def record_parse_failure(self, line: str, error: Exception) -> None: ...
