"""
Diagnostic reporting module.

Prints the parsed settings and discovered entries on stderr. Stdout is
reserved for the generated configuration.
"""

import sys
from enum import Enum
from typing import List, Optional, TextIO

from .analyzer import AggregationResult, DiscardedBucket
from .config import Settings


class OutputLevel(Enum):
    """Output verbosity levels."""
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2


class Reporter:
    """
    Handles diagnostic output for limine-gen.
    
    Output is human-readable and not meant to be parsed.
    """
    
    def __init__(self, level: OutputLevel = OutputLevel.NORMAL, stream: Optional[TextIO] = None):
        """
        Initialize the reporter.
        
        Args:
            level: Output verbosity level
            stream: Destination (defaults to sys.stderr at print time)
        """
        self.level = level
        self.stream = stream
    
    def _print(self, *args) -> None:
        print(*args, file=self.stream if self.stream is not None else sys.stderr)
    
    def print_settings(self, settings: Settings) -> None:
        """Print the parsed settings."""
        if self.level == OutputLevel.QUIET:
            return
        
        self._print(f"Config: {settings}")
    
    def print_scan_start(self, settings: Settings) -> None:
        if self.level != OutputLevel.VERBOSE:
            return
        
        self._print(f"Scanning {settings.scan_dir}...")
    
    def print_discarded(self, buckets: List[DiscardedBucket]) -> None:
        """
        Print version buckets that produced no entry.
        
        Args:
            buckets: Refused buckets
        """
        if self.level != OutputLevel.VERBOSE:
            return
        
        for bucket in buckets:
            version = bucket.version if bucket.version is not None else "<no version>"
            self._print(f"Skipped {version} ({bucket.reason}): {', '.join(bucket.paths)}")
    
    def print_result(self, result: AggregationResult) -> None:
        """
        Print the discovered entries.
        
        Args:
            result: Aggregation result to display
        """
        if self.level == OutputLevel.QUIET:
            return
        
        if self.level == OutputLevel.VERBOSE:
            self._print(f"Classified {result.item_count} boot image(s)")
            self.print_discarded(result.discarded)
        
        self._print("Found following entries:")
        for entry in result.entries:
            self._print(f"  {entry.title}: kernel={entry.kernel_path} initrd={entry.initrd_path}")
        
        if not result.entries:
            self._print("  (none)")
