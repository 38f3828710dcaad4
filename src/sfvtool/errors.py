"""Manifest and generation errors."""

from .common import SfvToolError


class ManifestError(SfvToolError):
    """Manifest file could not be processed."""
    pass


class ManifestNotFoundError(ManifestError):
    """Manifest file is absent or is not a regular file."""
    pass


class ManifestReadError(ManifestError):
    """Manifest file could not be read to the end."""
    pass


class DuplicateFilenameError(SfvToolError):
    """A file with the same basename was already collected in this run."""
    pass
