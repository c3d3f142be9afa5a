"""
Utility functions.

Shared helper functions used across limine-gen modules.
"""

import sys
from typing import Optional, TextIO


def write_output(text: str, stream: Optional[TextIO] = None) -> None:
    """
    Write the rendered configuration in a single write.
    
    Args:
        text: Text to write
        stream: Destination (defaults to sys.stdout)
        
    Raises:
        OSError: If the write fails or is short
    """
    if stream is None:
        stream = sys.stdout
    
    written = stream.write(text)
    if written is not None and written != len(text):
        raise OSError(f"Short write to output: {written} of {len(text)} characters")
    
    stream.flush()
