# File Reading Module
"""
Byte readers for external sources:
- Whole-file reads in fixed-size chunks
- Exact-length reads from the OS entropy device
- File hashing

Handles are always closed, including on error paths.
"""

def __getattr__(name):
    """Resolve reader names from byte_reader on first access."""
    from . import byte_reader
    return getattr(byte_reader, name)

__all__ = [
    'byte_dump',
    'random_bytes',
    'hash_file',
    'READ_CHUNK_SIZE',
    'ENTROPY_DEVICE',
]
