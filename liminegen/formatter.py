"""
Limine configuration formatting.

Renders boot entries into limine.conf syntax.
"""

from typing import List

from .analyzer import Entry
from .config import Settings

PROTOCOL = "linux"

# Paths are resolved against the partition Limine itself was loaded from
BOOT_RESOURCE = "boot()"


def format_entry(entry: Entry, settings: Settings) -> str:
    """
    Render a single boot entry block.
    
    Substitutions are literal; titles and the command line are assumed
    not to contain newlines.
    
    Args:
        entry: Entry to render
        settings: Run settings (provides the kernel command line)
        
    Returns:
        str: Entry block, terminated by a newline
    """
    return (
        f"/{entry.title}\n"
        f"    protocol: {PROTOCOL}\n"
        f"    kernel_path: {BOOT_RESOURCE}:{entry.kernel_path}\n"
        f"    kernel_cmdline: {settings.cmdline}\n"
        f"    module_path: {BOOT_RESOURCE}:{entry.initrd_path}\n"
    )


def render_limine(entries: List[Entry], settings: Settings) -> str:
    """
    Render the complete configuration.
    
    Args:
        entries: Entries in boot menu order
        settings: Run settings
        
    Returns:
        str: Timeout header, a blank line, then one block per entry
    """
    blocks = "".join(format_entry(entry, settings) for entry in entries)
    return f"timeout: {settings.timeout_s}\n\n{blocks}"
