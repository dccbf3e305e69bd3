# ABOUTME: Locations of the catalog's data files.
# ABOUTME: Resolves the books file, transaction log, and parse-error log under one data directory.

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path.home() / ".libcat"
DATA_DIR_ENVVAR = "LIBCAT_DATA_DIR"

BOOKS_FILENAME = "books.csv"
TRANSACTIONS_FILENAME = "transactions.txt"
ERRORS_FILENAME = "error.txt"


@dataclass(frozen=True)
class LibraryPaths:
    """The three files a catalog reads and writes."""

    books_file: Path
    transactions_file: Path
    errors_file: Path

    @classmethod
    def under(cls, data_dir: Path | None = None) -> "LibraryPaths":
        """Build the standard file layout inside data_dir.

        Args:
            data_dir: Directory holding the files. Defaults to ~/.libcat.
        """
        root = data_dir or DEFAULT_DATA_DIR
        return cls(
            books_file=root / BOOKS_FILENAME,
            transactions_file=root / TRANSACTIONS_FILENAME,
            errors_file=root / ERRORS_FILENAME,
        )
