# ABOUTME: Append-only log of books-file lines that failed to decode.
# ABOUTME: Implements ErrorSink; each failure becomes a timestamped block.

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from libcat.catalog.codec import format_timestamp
from libcat.catalog.errors import AuditLogError

logger = logging.getLogger(__name__)


class ParseErrorLog:
    """Records unparsable lines so a partial load can be investigated later."""

    def __init__(
        self, path: Path, clock: Callable[[], datetime] | None = None
    ) -> None:
        self._path = path
        self._clock = clock or datetime.now
        self._count = 0

    @property
    def path(self) -> Path:
        return self._path

    def record_parse_failure(self, line: str, error: Exception) -> None:
        block = (
            f"[{format_timestamp(self._clock())}] Error parsing line: {line}\n"
            f"{error}\n\n"
        )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(block)
        except OSError as exc:
            raise AuditLogError(f"Error writing error log {self._path}") from exc
        self._count += 1
        logger.debug("Recorded parse failure #%d in %s", self._count, self._path)

    def count(self) -> int:
        """Number of failures recorded by this instance."""
        return self._count
