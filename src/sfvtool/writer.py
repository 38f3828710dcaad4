"""SFV manifest writer."""

from datetime import datetime
from typing import List, Optional, Sequence

from . import PROGRAM_NAME, __version__
from .parser import COMMENT, SEPARATOR
from .records import FileRecord

NEWLINE = "\r\n"
HEADER = f"Generated by {PROGRAM_NAME} v{__version__}"

# Header: "on 2009-06-13 at 20:20:00"; table rows: "20:20.00 2009-06-15"
HEADER_TIMESTAMP_FORMAT = "on %Y-%m-%d at %H:%M:%S"
RECORD_TIMESTAMP_FORMAT = "%H:%M.%S %Y-%m-%d"


def header_line(generated_at: datetime) -> str:
    return f"{COMMENT} {HEADER} {generated_at.strftime(HEADER_TIMESTAMP_FORMAT)}"


def table_line(record: FileRecord, size_width: int) -> str:
    size = str(record.size).rjust(size_width)
    timestamp = record.modified_time.strftime(RECORD_TIMESTAMP_FORMAT)
    return f"{COMMENT} {size} {timestamp} {record.name}"


def checksum_line(record: FileRecord) -> str:
    return f"{record.name}{SEPARATOR}{record.formatted_checksum}"


def render_manifest(
    records: Sequence[FileRecord],
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Render records as SFV text with CR LF line endings.

    Records must already be sorted by name; they are written in the
    order given.

    Args:
        records: File records sorted by name
        generated_at: Header timestamp, defaults to now (local time)

    Returns:
        Manifest text
    """
    if generated_at is None:
        generated_at = datetime.now()

    size_width = max((len(str(r.size)) for r in records), default=0)

    lines: List[str] = [header_line(generated_at), COMMENT]
    lines.extend(table_line(r, size_width) for r in records)
    lines.append(COMMENT)
    lines.extend(checksum_line(r) for r in records)

    return "".join(line + NEWLINE for line in lines)
