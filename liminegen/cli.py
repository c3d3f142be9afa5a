"""
Command-line interface for limine-gen.

Provides the entry point and orchestrates scan, pairing and rendering.
"""

import sys
import traceback
from typing import Optional, List

from .config import parse_args, settings_from_args
from .analyzer import load_entries
from .formatter import render_limine
from .reporter import Reporter, OutputLevel
from .utils import write_output


def _setup_reporter(args) -> Reporter:
    """
    Set up reporter based on command-line arguments.
    
    Args:
        args: Parsed command-line arguments
        
    Returns:
        Reporter: Configured reporter instance
    """
    if args.quiet:
        output_level = OutputLevel.QUIET
    elif args.verbose:
        output_level = OutputLevel.VERBOSE
    else:
        output_level = OutputLevel.NORMAL
    
    return Reporter(output_level)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.
    
    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        
    Returns:
        int: Exit code:
            0 = configuration written
            1 = scan directory or output could not be accessed
            2 = invalid arguments (raised by argparse as SystemExit)
    """
    args = parse_args(argv)
    settings = settings_from_args(args)
    reporter = _setup_reporter(args)
    
    reporter.print_settings(settings)
    
    try:
        reporter.print_scan_start(settings)
        result = load_entries(settings)
        reporter.print_result(result)
        
        write_output(render_limine(result.entries, settings))
    
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
