"""Check mode: verify files listed in SFV manifests."""

import enum
import logging
import os
from pathlib import Path
from typing import Iterable, TextIO, Union

from .common import CRC32_CHUNK_SIZE, LogContext, try_compute_crc32
from .config import CheckOptions
from .errors import ManifestError
from .output import write_line
from .parser import parse_manifest
from .records import ManifestEntry
from .summary import CheckSummary

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """Result of checking one manifest entry."""

    OK = "ok"
    FAILED = "failed"
    UNREADABLE = "unreadable"
    SKIPPED = "skipped"


def exit_code(summary: CheckSummary, options: CheckOptions) -> int:
    """Exit code for a finished check run."""
    if options.status and summary.check_errors > 0:
        return 1
    if options.status and not options.ignore_missing and summary.read_errors > 0:
        return 1
    if options.strict and summary.format_errors > 0:
        return 1
    return 0


class ManifestVerifier:
    """Verifies manifests and accumulates a CheckSummary across them.

    OK/FAILED lines go to ``out``; diagnostics and the final warnings go
    to ``err``. With ``status`` set, per-file lines and warnings are
    suppressed and only the exit code reports the result.
    """

    def __init__(
        self,
        options: CheckOptions,
        out: TextIO,
        err: TextIO,
        chunk_size: int = CRC32_CHUNK_SIZE,
    ) -> None:
        self.options = options
        self.out = out
        self.err = err
        self.chunk_size = chunk_size
        self.summary = CheckSummary()

    def run(self, manifests: Iterable[Union[Path, str]]) -> int:
        """Verify every manifest in order and return the exit code."""
        for manifest in manifests:
            self.verify_manifest(manifest)

        if not self.options.status:
            for line in self.summary.warnings():
                write_line(self.err, line)

        logger.info(
            "Check complete",
            extra={"extra_fields": {
                "format_errors": self.summary.format_errors,
                "read_errors": self.summary.read_errors,
                "check_errors": self.summary.check_errors,
            }},
        )
        return exit_code(self.summary, self.options)

    def verify_manifest(self, manifest: Union[Path, str]) -> None:
        """Check all entries of one manifest.

        Anything that is not a per-entry result stops this manifest only.
        """
        name = os.fspath(manifest)
        try:
            self._verify_manifest(manifest, name)
        except ManifestError as e:
            write_line(self.err, f"{name}: {e.message}")
        except Exception:
            logger.debug(f"Unexpected error checking manifest {name!r}", exc_info=True)
            write_line(self.err, f"{name}: unexpected error")

    def _verify_manifest(self, manifest: Union[Path, str], name: str) -> None:
        parsed = parse_manifest(manifest)

        self.summary.format_errors += parsed.format_errors
        if self.options.warn:
            for line_number in parsed.ignored_lines:
                write_line(self.err, f"{name}:{line_number}: improperly formatted SFV line")

        with LogContext(logger, manifest=name):
            for entry in parsed.entries:
                self.verify_entry(entry)

    def verify_entry(self, entry: ManifestEntry) -> Outcome:
        """Check one entry, update the counters and print its result line."""
        result = try_compute_crc32(entry.filename, self.chunk_size)

        if not result.ok:
            if result.missing and self.options.ignore_missing:
                logger.debug(f"Skipping missing file: {entry.filename!r}")
                return Outcome.SKIPPED
            self.summary.read_errors += 1
            logger.debug(f"Cannot read {entry.filename!r}: {result.error.context}")
            self._emit(f"{entry.filename}: FAILED open or read")
            return Outcome.UNREADABLE

        if result.checksum == entry.expected_checksum:
            if not self.options.quiet:
                self._emit(f"{entry.filename}: OK")
            return Outcome.OK

        self.summary.check_errors += 1
        self._emit(f"{entry.filename}: FAILED")
        return Outcome.FAILED

    def _emit(self, line: str) -> None:
        if not self.options.status:
            write_line(self.out, line)
