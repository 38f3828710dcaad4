"""Configuration schema for sfvtool."""

from pydantic import BaseModel, Field, ConfigDict

from .common import CRC32_CHUNK_SIZE, LoggingConfig


class ChecksumConfig(BaseModel):
    """Checksum engine configuration."""

    model_config = ConfigDict(extra='forbid')

    chunk_size: int = Field(
        default=CRC32_CHUNK_SIZE,
        ge=1,
        description="Bytes read per iteration while computing CRC32"
    )


class CheckOptions(BaseModel):
    """Check-mode options. Ignored when generating."""

    model_config = ConfigDict(extra='forbid', frozen=True)

    ignore_missing: bool = Field(
        default=False,
        description="Don't fail or report status for missing files"
    )
    quiet: bool = Field(
        default=False,
        description="Don't print OK for each successfully verified file"
    )
    status: bool = Field(
        default=False,
        description="Don't output anything, exit code shows success"
    )
    strict: bool = Field(
        default=False,
        description="Exit non-zero for improperly formatted checksum lines"
    )
    warn: bool = Field(
        default=False,
        description="Warn about improperly formatted checksum lines"
    )


class SfvToolConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    checksum: ChecksumConfig = Field(default_factory=ChecksumConfig)
    check: CheckOptions = Field(default_factory=CheckOptions)
