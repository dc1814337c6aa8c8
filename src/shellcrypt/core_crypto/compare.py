"""
Hash Comparator

Checks a candidate plaintext against an expected hex digest.

The final equality test uses cryptography's constant_time.bytes_eq, so it
does not stop at the first differing character. This is best-effort only:
computing the candidate digest and a length mismatch are not hidden.
"""

from typing import Union

from cryptography.hazmat.primitives import constant_time

from .algorithms import Algorithm, hex_digest
from .encoding import Data
from .errors import InvalidInputType


def compare(algo: Union[Algorithm, str], candidate: Data, expected_hex: str) -> bool:
    """
    Hash candidate with algo and compare against expected_hex.

    The comparison is case-insensitive on the hex digest.

    Args:
        algo: Algorithm member or name (e.g. "sha256")
        candidate: Plaintext to hash
        expected_hex: Expected digest in hexadecimal

    Returns:
        True if the digest of candidate equals expected_hex

    Raises:
        UnknownAlgorithm: If algo is not a supported algorithm
        InvalidInputType: If expected_hex is not a str

    Example:
        >>> compare("md5", "", "d41d8cd98f00b204e9800998ecf8427e")
        True
    """
    algo = Algorithm.parse(algo)
    if not isinstance(expected_hex, str):
        raise InvalidInputType(
            f"Expected hash must be str, not {type(expected_hex).__name__}"
        )

    computed = hex_digest(algo, candidate)
    return constant_time.bytes_eq(
        computed.encode('utf-8'),
        expected_hex.upper().encode('utf-8'),
    )
