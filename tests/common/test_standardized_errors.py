"""Tests for standardized error handling."""

from sfvtool.common import (
    SfvToolError, ConfigurationError, FileProcessingError, NotFoundError, ReadError
)
from sfvtool.errors import (
    DuplicateFilenameError, ManifestError, ManifestNotFoundError, ManifestReadError
)


class TestStandardizedErrors:
    """Test standardized error types."""

    def test_sfvtool_error_base(self):
        """Test base SfvToolError functionality."""
        error = SfvToolError("Test error", file_path="/test/path")

        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.context == {"file_path": "/test/path"}

    def test_file_errors_inheritance(self):
        """Test per-file error inheritance."""
        not_found = NotFoundError("file not found", file_path="/test/path")
        read_error = ReadError("couldn't read file", file_path="/test/path")

        assert isinstance(not_found, FileProcessingError)
        assert isinstance(read_error, FileProcessingError)
        assert isinstance(read_error, SfvToolError)
        assert not isinstance(read_error, NotFoundError)

    def test_manifest_errors_inheritance(self):
        """Test manifest error inheritance."""
        assert isinstance(ManifestNotFoundError("file not found"), ManifestError)
        assert isinstance(ManifestReadError("couldn't read file"), ManifestError)
        assert isinstance(ManifestError("x"), SfvToolError)

    def test_other_errors(self):
        assert isinstance(ConfigurationError("bad config"), SfvToolError)
        assert isinstance(DuplicateFilenameError("dup", name="a.txt"), SfvToolError)

    def test_error_context_preservation(self):
        """Test that error context is preserved."""
        error = ReadError(
            "couldn't read file",
            file_path="/test/path",
            reason="Permission denied",
        )

        assert error.context["file_path"] == "/test/path"
        assert error.context["reason"] == "Permission denied"
