"""
Byte Readers

Thin wrappers over external byte sources:
- byte_dump: read a whole file in fixed-size chunks
- random_bytes: read exactly n bytes from the OS entropy device
- hash_file: byte_dump + digest, for hashing file contents

Every handle is opened immediately before use and closed on every exit
path, including failures. Reads block; there is no timeout.
"""

import logging
import os
from typing import BinaryIO, Union

from ..core_crypto.algorithms import Algorithm, hex_digest
from ..core_crypto.errors import ResourceOpenFailure, ShortReadFailure


logger = logging.getLogger(__name__)


# Constants
READ_CHUNK_SIZE = 4096
ENTROPY_DEVICE = "/dev/urandom"

PathLike = Union[str, bytes, os.PathLike]


def _open_unbuffered(path: PathLike) -> BinaryIO:
    """Open path for binary reading, mapping OSError to ResourceOpenFailure."""
    try:
        return open(path, 'rb', buffering=0)
    except OSError as e:
        raise ResourceOpenFailure(f"Cannot open {os.fsdecode(path)}: {e}") from e


def byte_dump(path: PathLike, chunk_size: int = READ_CHUNK_SIZE) -> bytes:
    """
    Read an entire file into memory.

    Args:
        path: Path to the file
        chunk_size: Read chunk size in bytes

    Returns:
        The full file contents

    Raises:
        ResourceOpenFailure: If the file cannot be opened
        OSError: If a read fails; the handle is closed first
    """
    chunks = []
    with _open_unbuffered(path) as f:
        logger.debug("Reading %s", os.fsdecode(path))
        while chunk := f.read(chunk_size):
            chunks.append(chunk)

    data = b''.join(chunks)
    logger.debug("Read %d bytes from %s", len(data), os.fsdecode(path))
    return data


def random_bytes(n: int, device: PathLike = ENTROPY_DEVICE) -> bytes:
    """
    Read exactly n bytes from the OS secure random device.

    Partial reads are accumulated until n bytes are collected.

    Args:
        n: Number of bytes wanted
        device: Entropy device path

    Returns:
        n random bytes

    Raises:
        ValueError: If n is negative
        ResourceOpenFailure: If the device cannot be opened
        ShortReadFailure: If the device returns no data before n bytes arrive
    """
    if n < 0:
        raise ValueError(f"Byte count must be non-negative, got {n}")

    buf = bytearray()
    with _open_unbuffered(device) as f:
        while len(buf) < n:
            chunk = f.read(n - len(buf))
            if not chunk:
                raise ShortReadFailure(
                    f"Short read from {os.fsdecode(device)}: "
                    f"got {len(buf)} of {n} bytes"
                )
            buf += chunk

    logger.debug("Read %d random bytes from %s", n, os.fsdecode(device))
    return bytes(buf)


def hash_file(algo: Union[Algorithm, str], path: PathLike) -> str:
    """
    Hash the contents of a file.

    Returns:
        Uppercase hex digest of the file contents

    Raises:
        UnknownAlgorithm: If algo is not a supported algorithm
        ResourceOpenFailure: If the file cannot be opened
    """
    # Resolve first so a bad name fails before touching the filesystem
    algo = Algorithm.parse(algo)
    return hex_digest(algo, byte_dump(path))
