# ABOUTME: Converts between BookRecord and its one-line delimited text form.
# ABOUTME: Fields are joined without quoting or escaping, so they must not contain the delimiter.

from datetime import datetime

from libcat.catalog.errors import FormatError, ValidationError
from libcat.catalog.types import BookRecord, BookStatus

DELIMITER = ","
HEADER = DELIMITER.join(["Title", "Author", "ISBN", "Status", "LastIssuedDate"])
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_FIELD_COUNT = 5
_STATUS_BY_NAME = {status.value: status for status in BookStatus}


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp the way the books file and the logs store it."""
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def encode_record(record: BookRecord) -> str:
    """Encode a record as ``title,author,isbn,status,lastIssuedDate``.

    The current borrower is not part of the persisted form.
    """
    return DELIMITER.join([
        record.title,
        record.author,
        record.isbn,
        record.status.value,
        format_timestamp(record.last_issued_date),
    ])


def decode_record(line: str) -> BookRecord:
    """Decode one data line of the books file.

    Args:
        line: A single line, without its trailing newline.

    Returns:
        The reconstructed BookRecord. Fields past the fifth are ignored.

    Raises:
        FormatError: If the line has fewer than five fields, names an
            unknown status, carries an unparseable timestamp, or has an
            empty ISBN.
    """
    fields = line.split(DELIMITER)
    if len(fields) < _FIELD_COUNT:
        raise FormatError(
            f"Expected {_FIELD_COUNT} fields, found {len(fields)}"
        )

    title, author, isbn, status_name, stamp = fields[:_FIELD_COUNT]

    status = _STATUS_BY_NAME.get(status_name)
    if status is None:
        raise FormatError(f"Unknown status '{status_name}'")

    try:
        last_issued = datetime.strptime(stamp, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise FormatError(f"Invalid timestamp '{stamp}'") from exc

    try:
        return BookRecord(
            title=title,
            author=author,
            isbn=isbn,
            status=status,
            last_issued_date=last_issued,
        )
    except ValidationError as exc:
        raise FormatError(str(exc)) from exc
