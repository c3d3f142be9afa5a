"""
Limine-gen - Limine Boot Entry Generator

A small command-line utility that scans the boot partition for kernel and
initramfs images, pairs them by version and prints a Limine configuration.
"""

__version__ = "0.1.0"
__author__ = "Limine-gen Contributors"
__license__ = "MIT"

from .cli import main

__all__ = ["main"]
