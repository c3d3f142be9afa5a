"""
Configuration module.

Parses command-line arguments into an immutable settings record.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from . import __version__

DEFAULT_TITLE = "Linux"
DEFAULT_SCAN_PATH = "/boot"
DEFAULT_TIMEOUT = 5

# Limine reads the timeout as an unsigned 32-bit value
MAX_TIMEOUT = 2 ** 32 - 1


@dataclass(frozen=True)
class Settings:
    """
    Settings for a single run.
    
    Attributes:
        title_prefix: Display string for entries without a version
        scan_dir: Directory scanned for kernels and initramfs images
        cmdline: Kernel command line substituted verbatim into each entry
        timeout_s: Value of the 'timeout:' header
    """
    cmdline: str
    title_prefix: str = DEFAULT_TITLE
    scan_dir: Path = Path(DEFAULT_SCAN_PATH)
    timeout_s: int = DEFAULT_TIMEOUT


def timeout_value(value: str) -> int:
    """
    Argparse type for --timeout.
    
    Args:
        value: Raw command-line string
        
    Returns:
        int: Parsed timeout in seconds
        
    Raises:
        argparse.ArgumentTypeError: If value is not an integer in u32 range
    """
    try:
        timeout = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    
    if timeout < 0 or timeout > MAX_TIMEOUT:
        raise argparse.ArgumentTypeError(
            f"timeout must be between 0 and {MAX_TIMEOUT}, got {timeout}"
        )
    
    return timeout


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.
    
    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="limine-gen",
        description="Generate Limine boot entries from kernels found in a boot directory",
        epilog='Example: limine-gen --cmdline "root=/dev/sda1 rw" > /boot/limine.conf',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    
    parser.add_argument(
        "--title",
        default=DEFAULT_TITLE,
        help=f"Title used for entries without a version (default: {DEFAULT_TITLE})",
    )
    
    parser.add_argument(
        "--scan-path",
        type=Path,
        default=Path(DEFAULT_SCAN_PATH),
        help=f"Directory to scan for kernels and initramfs images (default: {DEFAULT_SCAN_PATH})",
    )
    
    parser.add_argument(
        "--cmdline",
        required=True,
        help="Kernel command line used for every entry",
    )
    
    parser.add_argument(
        "--timeout",
        type=timeout_value,
        default=DEFAULT_TIMEOUT,
        help=f"Boot menu timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Report scan progress and skipped versions on stderr",
    )
    
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress diagnostic output on stderr, including the settings dump that echoes --title",
    )
    
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build the settings record from parsed arguments."""
    return Settings(
        cmdline=args.cmdline,
        title_prefix=args.title,
        scan_dir=args.scan_path,
        timeout_s=args.timeout,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.
    
    Exits with status 2 and a usage message on stderr for unknown options,
    a missing --cmdline, a malformed timeout or conflicting verbosity flags.
    
    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        
    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if args.quiet and args.verbose:
        parser.error("--quiet and --verbose cannot be used together")
    
    return args

