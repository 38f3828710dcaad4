"""Records exchanged between the scanner, parser and writer."""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Tuple, Union

from .common import (
    CRC32_CHUNK_SIZE, NotFoundError, ReadError, compute_crc32, format_crc32, stat_regular_file
)


@dataclass(frozen=True)
class FileRecord:
    """A scanned file."""

    name: str
    size: int
    modified_time: datetime
    checksum: int

    @property
    def formatted_checksum(self) -> str:
        return format_crc32(self.checksum)

    @classmethod
    def scan(cls, file_path: Union[Path, str], chunk_size: int = CRC32_CHUNK_SIZE) -> "FileRecord":
        """
        Build a record from a file on disk.

        Args:
            file_path: Path to a regular file
            chunk_size: Read size used for the checksum

        Returns:
            FileRecord named after the file's basename

        Raises:
            NotFoundError: If the path is not a regular file
            ReadError: If the file cannot be read
        """
        path = Path(file_path)
        try:
            stat = stat_regular_file(path)
        except OSError as e:
            raise ReadError("couldn't read file", file_path=str(file_path), reason=str(e)) from e

        if stat is None:
            raise NotFoundError("file not found", file_path=str(file_path))

        return cls(
            name=path.name,
            size=stat.st_size,
            modified_time=datetime.fromtimestamp(stat.st_mtime),
            checksum=compute_crc32(path, chunk_size),
        )


@dataclass(frozen=True)
class ManifestEntry:
    """One data line of a manifest."""

    filename: str
    expected_checksum: int


@dataclass(frozen=True)
class ParsedManifest:
    """Entries of a manifest in file order plus the 1-based ignored line numbers."""

    entries: Tuple[ManifestEntry, ...] = ()
    ignored_lines: Tuple[int, ...] = ()

    @property
    def format_errors(self) -> int:
        return len(self.ignored_lines)


def sort_records(records: List[FileRecord]) -> List[FileRecord]:
    """Sort records by name, comparing the encoded bytes."""
    return sorted(records, key=lambda r: os.fsencode(r.name))
