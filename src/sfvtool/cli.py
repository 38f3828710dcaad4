"""Command-line entry point for sfvtool."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from . import PROGRAM_NAME, __version__
from .common import ConfigLoader, ConfigurationError, get_logger, setup_logging
from .config import CheckOptions, SfvToolConfig
from .generator import ManifestGenerator
from .output import write_line
from .verifier import ManifestVerifier

# Application name derived from package name
_package = __package__ or "sfvtool"
APP_NAME = _package.replace('_', '-').replace('.', '-')

CHECK_FLAGS = ("ignore_missing", "quiet", "status", "strict", "warn")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.exit(1, f"{message}\nTry '{self.prog} --help' for more information\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROGRAM_NAME,
        usage="%(prog)s [OPTION]... [FILE]...",
        description="Print or check Simple File Verification (SFV) checksums.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-c", "--check",
        action="store_true",
        help="read SFVs from FILEs and check them"
    )
    parser.add_argument(
        "--ignore-missing", "--ignore_missing",
        dest="ignore_missing",
        action="store_true",
        help="don't fail or report status for missing files (with check)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="don't print OK for each successfully verified file (with check)"
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="don't output anything, status code shows success (with check)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit non-zero for improperly formatted checksum lines (with check)"
    )
    parser.add_argument(
        "-w", "--warn",
        action="store_true",
        help="warn about improperly formatted checksum lines (with check)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (overrides config)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{PROGRAM_NAME} v{__version__}",
        help="output version information and exit"
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help=argparse.SUPPRESS)
    return parser


def resolve_check_options(config: SfvToolConfig, args: argparse.Namespace) -> CheckOptions:
    """Combine configured defaults with flags given on the command line."""
    enabled = {flag: True for flag in CHECK_FLAGS if getattr(args, flag)}
    return config.check.model_copy(update=enabled)


def check_command(
    config: SfvToolConfig,
    options: CheckOptions,
    manifests: Sequence[str],
    out: TextIO,
    err: TextIO,
) -> int:
    """Verify manifests.

    Returns:
        Exit code (0 for success)
    """
    verifier = ManifestVerifier(options, out, err, chunk_size=config.checksum.chunk_size)
    return verifier.run(manifests)


def generate_command(
    config: SfvToolConfig,
    files: Sequence[str],
    out: TextIO,
    err: TextIO,
) -> int:
    """Print a manifest for files.

    Returns:
        Exit code (0 for success)
    """
    generator = ManifestGenerator(err, chunk_size=config.checksum.chunk_size)
    return generator.run(files, out)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)

    if unknown:
        write_line(sys.stderr, f"unrecognized option '{unknown[0]}'")
        write_line(sys.stderr, f"Try '{PROGRAM_NAME} --help' for more information")
        return 1

    if not args.files:
        parser.print_help()
        return 0

    loader = ConfigLoader(app_name=APP_NAME, config_class=SfvToolConfig)
    try:
        config = loader.load(defaults_path=args.config)
    except ConfigurationError as e:
        write_line(sys.stderr, f"{PROGRAM_NAME}: {e.message}")
        return 1

    setup_logging(
        level=args.log_level or config.logging.level,
        format=config.logging.format,
        log_file=Path(config.logging.file) if config.logging.file else None,
    )
    logger = get_logger(__package__ or __name__)
    logger.debug(
        "Starting sfvtool",
        extra={"extra_fields": {"version": __version__, "check": args.check, "files": len(args.files)}},
    )

    if args.check:
        options = resolve_check_options(config, args)
        return check_command(config, options, args.files, sys.stdout, sys.stderr)

    return generate_command(config, args.files, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
