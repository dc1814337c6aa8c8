"""
SHA-1 Hash Implementation (From Scratch)

Implements SHA-1 as defined in FIPS 180-4. SHA-1 is broken for collision
resistance; it is provided for interoperability (legacy checksums, HMAC-SHA1).

Components:
- Padding: Same 512-bit Merkle-Damgard padding as SHA-256
- Message Schedule: Expands 16 words to 80 words with a 1-bit left rotation
- Compression: 80 rounds in four 20-round phases, each with its own (f, k)
- Output: 160-bit (20-byte) digest
"""

from typing import List

from .encoding import Data, bytes_to_hex, to_bytes
from .padding import pad_message, split_blocks


BLOCK_SIZE = 64
DIGEST_SIZE = 20

H_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# One additive constant per 20-round phase
K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

MASK_32 = 0xFFFFFFFF


def _left_rotate(value: int, amount: int) -> int:
    """Left rotate a 32-bit integer by the specified amount."""
    return ((value << amount) | (value >> (32 - amount))) & MASK_32


def _create_message_schedule(chunk: bytes) -> List[int]:
    """
    Expand a 64-byte chunk into 80 words.

    For i from 16 to 79:
        W[i] = ROTL1(W[i-3] ^ W[i-8] ^ W[i-14] ^ W[i-16])
    """
    w = [int.from_bytes(chunk[i:i + 4], byteorder='big') for i in range(0, 64, 4)]
    for i in range(16, 80):
        w.append(_left_rotate(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))
    return w


def _round_function(t: int, b: int, c: int, d: int):
    """Return (f, k) for round t."""
    if t < 20:
        return (b & c) | (~b & d & MASK_32), K[0]
    if t < 40:
        return b ^ c ^ d, K[1]
    if t < 60:
        return (b & c) | (b & d) | (c & d), K[2]
    return b ^ c ^ d, K[3]


def _compress(state: List[int], w: List[int]) -> List[int]:
    """Run 80 rounds over one block and fold the result into state."""
    a, b, c, d, e = state

    for t in range(80):
        f, k = _round_function(t, b, c, d)
        temp = (_left_rotate(a, 5) + f + e + k + w[t]) & MASK_32
        e = d
        d = c
        c = _left_rotate(b, 30)
        b = a
        a = temp

    return [(s + v) & MASK_32 for s, v in zip(state, (a, b, c, d, e))]


def sha1(data: Data) -> bytes:
    """
    Compute the SHA-1 hash of the input data.

    Example:
        >>> sha1(b"abc").hex()
        'a9993e364706816aba3e25717850c26c9cd0d89d'
    """
    padded = pad_message(to_bytes(data), BLOCK_SIZE, 8, 'big')

    state = list(H_INITIAL)
    for chunk in split_blocks(padded, BLOCK_SIZE):
        state = _compress(state, _create_message_schedule(chunk))

    return b''.join(word.to_bytes(4, byteorder='big') for word in state)


def sha1_hex(data: Data) -> str:
    """Compute SHA-1 hash as a 40-character uppercase hex string."""
    return bytes_to_hex(sha1(data))
