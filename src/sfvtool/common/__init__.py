"""Shared infrastructure for sfvtool."""

from .config import ConfigLoader
from .logging import setup_logging, get_logger, LogContext
from .logging_config import LoggingConfig
from .errors import (
    SfvToolError, ConfigurationError, FileProcessingError, NotFoundError, ReadError
)
from .path_utils import stat_regular_file
from .checksums import (
    CRC32_CHUNK_SIZE, ChecksumResult, compute_crc32, try_compute_crc32,
    format_crc32, parse_crc32
)

__all__ = [
    'ConfigLoader',
    'LoggingConfig',
    'setup_logging',
    'get_logger',
    'LogContext',
    'SfvToolError',
    'ConfigurationError',
    'FileProcessingError',
    'NotFoundError',
    'ReadError',
    'CRC32_CHUNK_SIZE',
    'ChecksumResult',
    'compute_crc32',
    'try_compute_crc32',
    'format_crc32',
    'parse_crc32',
    'stat_regular_file',
]
