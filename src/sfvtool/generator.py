"""Generate mode: scan files and print an SFV manifest."""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Set, TextIO, Union

from .common import (
    CRC32_CHUNK_SIZE, FileProcessingError, NotFoundError, ReadError, stat_regular_file
)
from .errors import DuplicateFilenameError
from .output import write_line, write_text
from .records import FileRecord, sort_records
from .summary import GenerateSummary
from .writer import render_manifest

logger = logging.getLogger(__name__)


class ManifestGenerator:
    """Collects file records and renders them as one manifest.

    Problems with individual files are reported on ``err`` and never stop
    the batch. When two inputs share a basename the first one wins.
    """

    def __init__(self, err: TextIO, chunk_size: int = CRC32_CHUNK_SIZE) -> None:
        self.err = err
        self.chunk_size = chunk_size
        self.summary = GenerateSummary()
        self._seen_names: Set[str] = set()

    def collect(self, paths: Iterable[Union[Path, str]]) -> List[FileRecord]:
        """Scan every path and return the records sorted by name."""
        records: List[FileRecord] = []

        for file_path in paths:
            arg = os.fspath(file_path)
            try:
                records.append(self._scan(arg))
            except DuplicateFilenameError as e:
                self.summary.duplicated_files += 1
                self._report(f"{arg}: {e.message}")
            except FileProcessingError as e:
                self._report(f"{arg}: {e.message}")
            except Exception:
                logger.debug(f"Unexpected error scanning {arg!r}", exc_info=True)
                self._report(f"{arg}: unexpected error")

        return sort_records(records)

    def _scan(self, arg: str) -> FileRecord:
        path = Path(arg)
        try:
            regular = stat_regular_file(path) is not None
        except OSError as e:
            raise ReadError("couldn't read file", file_path=arg, reason=str(e)) from e

        if not regular:
            raise NotFoundError("file not found", file_path=arg)

        # The name is claimed before scanning, even if the scan then fails
        if path.name in self._seen_names:
            raise DuplicateFilenameError("filename already exists", file_path=arg, name=path.name)
        self._seen_names.add(path.name)

        record = FileRecord.scan(path, self.chunk_size)
        logger.debug(f"Scanned: {{'path': {arg!r}, 'crc32': {record.formatted_checksum!r}}}")
        return record

    def run(self, paths: Iterable[Union[Path, str]], out: TextIO) -> int:
        """Write the manifest for ``paths`` to ``out``.

        Returns:
            Exit code (always 0; nothing is written when no file was collected)
        """
        records = self.collect(paths)
        if not records:
            return 0

        write_text(out, render_manifest(records))

        for line in self.summary.warnings():
            self._report(line)

        logger.info(
            "Generated manifest",
            extra={"extra_fields": {
                "files": len(records),
                "duplicated_files": self.summary.duplicated_files,
            }},
        )
        return 0

    def _report(self, message: str) -> None:
        write_line(self.err, message)
