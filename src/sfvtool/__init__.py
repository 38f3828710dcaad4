"""Print or check Simple File Verification (SFV) checksums."""

__version__ = "1.0.0"

PROGRAM_NAME = "sfvtool"
