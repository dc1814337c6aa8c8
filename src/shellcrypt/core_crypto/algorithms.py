"""
Algorithm Registry

A closed set of digest algorithms and a fixed dispatch table mapping each one
to its static configuration and raw-byte digest function. Algorithm names
coming from callers are parsed into the enum here, at the boundary, so an
unknown name fails with UnknownAlgorithm before any hashing happens.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union

from .encoding import Data, bytes_to_hex
from .errors import UnknownAlgorithm
from .md5 import md5
from .sha1 import sha1
from .sha256 import sha256
from .sha512 import sha384, sha512


logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Supported digest algorithms."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @classmethod
    def parse(cls, name: Union['Algorithm', str]) -> 'Algorithm':
        """
        Resolve an algorithm from an enum member or a name.

        Names are matched case-insensitively with '-' and '_' ignored, so
        "sha256", "SHA-256" and "Sha_256" all resolve to SHA256.

        Raises:
            UnknownAlgorithm: If the name matches no supported algorithm
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().lower().replace('-', '').replace('_', '')
            for member in cls:
                if member.value == key:
                    return member
        logger.debug("Rejected unknown algorithm %r", name)
        raise UnknownAlgorithm(name)


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """Static per-algorithm configuration."""
    name: str
    word_bits: int
    block_size: int
    state_words: int
    rounds: int
    digest_size: int
    digest: Callable[[Data], bytes]

    @property
    def hex_length(self) -> int:
        """Length of the hex rendering of a digest."""
        return self.digest_size * 2


DESCRIPTORS: Dict[Algorithm, AlgorithmDescriptor] = {
    Algorithm.MD5: AlgorithmDescriptor("MD5", 32, 64, 4, 64, 16, md5),
    Algorithm.SHA1: AlgorithmDescriptor("SHA-1", 32, 64, 5, 80, 20, sha1),
    Algorithm.SHA256: AlgorithmDescriptor("SHA-256", 32, 64, 8, 64, 32, sha256),
    Algorithm.SHA384: AlgorithmDescriptor("SHA-384", 64, 128, 8, 80, 48, sha384),
    Algorithm.SHA512: AlgorithmDescriptor("SHA-512", 64, 128, 8, 80, 64, sha512),
}


def get_descriptor(algo: Union[Algorithm, str]) -> AlgorithmDescriptor:
    """Look up the descriptor for an algorithm or algorithm name."""
    return DESCRIPTORS[Algorithm.parse(algo)]


def digest(algo: Union[Algorithm, str], data: Data) -> bytes:
    """Compute the raw digest of data with the named algorithm."""
    return get_descriptor(algo).digest(data)


def hex_digest(algo: Union[Algorithm, str], data: Data) -> str:
    """Compute the uppercase hex digest of data with the named algorithm."""
    return bytes_to_hex(digest(algo, data))
