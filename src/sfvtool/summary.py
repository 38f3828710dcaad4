"""Run summaries and their warning lines."""

from dataclasses import dataclass
from typing import List


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


@dataclass
class GenerateSummary:
    """Counters for a generate run."""

    duplicated_files: int = 0

    def warnings(self) -> List[str]:
        if self.duplicated_files == 0:
            return []
        noun = _plural(self.duplicated_files, "file", "files")
        return [f"WARNING: {self.duplicated_files} {noun} ignored"]


@dataclass
class CheckSummary:
    """Counters for a check run, accumulated across manifests."""

    format_errors: int = 0
    read_errors: int = 0
    check_errors: int = 0

    def warnings(self) -> List[str]:
        lines = []
        if self.format_errors:
            lines.append(
                f"WARNING: {self.format_errors} "
                + _plural(self.format_errors, "line is", "lines are")
                + " improperly formatted"
            )
        if self.read_errors:
            lines.append(
                f"WARNING: {self.read_errors} "
                + _plural(self.read_errors, "listed file", "listed files")
                + " could not be read"
            )
        if self.check_errors:
            lines.append(
                f"WARNING: {self.check_errors} "
                + _plural(self.check_errors, "computed checksum", "computed checksums")
                + " did NOT match"
            )
        return lines
