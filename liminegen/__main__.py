"""
Entry point for running limine-gen as a module.

Usage:
    python -m liminegen --cmdline "root=/dev/sda1" [options]
"""

import sys
from liminegen.cli import main

if __name__ == "__main__":
    sys.exit(main())
