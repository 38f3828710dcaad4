"""SFV manifest parser.

A data line is ``<filename> <checksum>`` where the checksum is exactly
8 hex digits at the end of the line. Filenames may contain spaces, so
the checksum is anchored to the end and everything before the last
separating space is the filename.
"""

import logging
import os
import re
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Union

from .common import parse_crc32, stat_regular_file
from .errors import ManifestNotFoundError, ManifestReadError
from .records import ManifestEntry, ParsedManifest

logger = logging.getLogger(__name__)

COMMENT = ";"
SEPARATOR = " "
LINE_SEPARATOR = b"\r\n"
READ_SIZE = 4096

_SFV_LINE = re.compile(r"(?P<filename>.+) (?P<checksum>[0-9A-Fa-f]{8})", re.DOTALL)


def iter_lines(
    stream: BinaryIO,
    delimiter: bytes = LINE_SEPARATOR,
    read_size: int = READ_SIZE,
) -> Iterator[bytes]:
    """
    Split a binary stream on a literal delimiter.

    A lone LF or CR is part of the line. The trailing record is always
    yielded, even when empty, so a stream ending in the delimiter yields
    a final empty line.
    """
    buffer = b""
    while chunk := stream.read(read_size):
        buffer += chunk
        *lines, buffer = buffer.split(delimiter)
        yield from lines
    yield buffer


def parse_line(line: str) -> Optional[ManifestEntry]:
    """Parse one data line, returning None when it is malformed."""
    match = _SFV_LINE.fullmatch(line)
    if match is None:
        return None

    try:
        checksum = parse_crc32(match.group("checksum"))
    except ValueError:
        return None

    return ManifestEntry(filename=match.group("filename"), expected_checksum=checksum)


def parse_manifest(manifest_path: Union[Path, str]) -> ParsedManifest:
    """
    Parse an SFV manifest.

    Blank lines and ``;`` comments are skipped. Malformed lines are
    recorded by 1-based line number, counting every line.

    Args:
        manifest_path: Path to the manifest

    Returns:
        ParsedManifest with entries in file order

    Raises:
        ManifestNotFoundError: If the path is not a regular file
        ManifestReadError: If reading fails before EOF
    """
    entries: List[ManifestEntry] = []
    ignored_lines: List[int] = []

    try:
        if stat_regular_file(manifest_path) is None:
            raise ManifestNotFoundError("file not found", manifest=str(manifest_path))

        with open(manifest_path, "rb") as f:
            for line_number, raw_line in enumerate(iter_lines(f), start=1):
                line = os.fsdecode(raw_line)
                if not line or line.startswith(COMMENT):
                    continue

                entry = parse_line(line)
                if entry is None:
                    ignored_lines.append(line_number)
                    continue
                entries.append(entry)
    except OSError as e:
        raise ManifestReadError(
            "couldn't read file", manifest=str(manifest_path), reason=str(e)
        ) from e

    logger.debug(
        f"Parsed manifest: {{'path': {str(manifest_path)!r}, "
        f"'entries': {len(entries)}, 'ignored_lines': {len(ignored_lines)}}}"
    )

    return ParsedManifest(entries=tuple(entries), ignored_lines=tuple(ignored_lines))
