"""CRC32 checksum engine."""

import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import FileProcessingError, NotFoundError, ReadError
from .path_utils import stat_regular_file

# Constants for checksum calculation
CRC32_CHUNK_SIZE = 4096
CRC32_HEX_DIGITS = 8


def compute_crc32(file_path: Union[Path, str], chunk_size: int = CRC32_CHUNK_SIZE) -> int:
    """
    Compute CRC32 checksum of entire file.

    The file is streamed in chunks; the result does not depend on the
    chunk size.

    Args:
        file_path: Path to the file
        chunk_size: Number of bytes read per iteration

    Returns:
        CRC32 checksum as unsigned 32-bit integer

    Raises:
        NotFoundError: If the path is not an existing regular file
        ReadError: If the file cannot be opened or a read fails before EOF
    """
    crc = 0
    try:
        if stat_regular_file(file_path) is None:
            raise NotFoundError("file not found", file_path=str(file_path))

        with open(file_path, 'rb') as f:
            while chunk := f.read(chunk_size):
                crc = zlib.crc32(chunk, crc)
    except OSError as e:
        raise ReadError("couldn't read file", file_path=str(file_path), reason=str(e)) from e

    # Return as unsigned 32-bit integer
    return crc & 0xFFFFFFFF


def format_crc32(crc: int) -> str:
    """Render a checksum as 8 uppercase hex digits (e.g. "A1B2C3D4")."""
    return f"{crc & 0xFFFFFFFF:08X}"


def parse_crc32(text: str) -> int:
    """
    Parse an 8-digit hexadecimal checksum, in any letter case.

    Raises:
        ValueError: If text is not exactly 8 hex digits
    """
    if len(text) != CRC32_HEX_DIGITS or not all(c in "0123456789abcdefABCDEF" for c in text):
        raise ValueError(f"invalid CRC32 checksum: {text!r}")
    return int(text, 16)


@dataclass(frozen=True)
class ChecksumResult:
    """Outcome of a checksum computation: either a value or a tagged error."""

    checksum: Optional[int] = None
    error: Optional[FileProcessingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def missing(self) -> bool:
        return isinstance(self.error, NotFoundError)


def try_compute_crc32(file_path: Union[Path, str], chunk_size: int = CRC32_CHUNK_SIZE) -> ChecksumResult:
    """
    Compute CRC32 checksum, returning errors instead of raising them.

    Args:
        file_path: Path to the file
        chunk_size: Number of bytes read per iteration

    Returns:
        ChecksumResult with either checksum or error set
    """
    try:
        return ChecksumResult(checksum=compute_crc32(file_path, chunk_size))
    except (NotFoundError, ReadError) as e:
        return ChecksumResult(error=e)
