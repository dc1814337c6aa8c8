"""
MD5 Hash Implementation (From Scratch)

Implements MD5 as defined in RFC 1321. MD5 is broken for collision
resistance; it is provided for checksums and legacy interoperability.

Differences from the SHA family:
- Message words and the length field are little-endian
- The state is 4 words, serialized little-endian
- Each of the 64 steps picks a message word through a per-phase index map
"""

from typing import List

from .encoding import Data, bytes_to_hex, to_bytes
from .padding import pad_message, split_blocks


BLOCK_SIZE = 64
DIGEST_SIZE = 16

H_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# T[i] = floor(2^32 * abs(sin(i + 1)))
T = (
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee, 0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be, 0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa, 0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed, 0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c, 0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05, 0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039, 0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1, 0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
)

# Per-step left rotation amounts
S = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

MASK_32 = 0xFFFFFFFF


def _left_rotate(value: int, amount: int) -> int:
    """Left rotate a 32-bit integer by the specified amount."""
    value &= MASK_32
    return ((value << amount) | (value >> (32 - amount))) & MASK_32


def _step(j: int, b: int, c: int, d: int):
    """Return (F, g): the phase function value and message word index for step j."""
    if j < 16:
        return (b & c) | (~b & d & MASK_32), j
    if j < 32:
        return (d & b) | (~d & c & MASK_32), (5 * j + 1) % 16
    if j < 48:
        return b ^ c ^ d, (3 * j + 5) % 16
    return c ^ (b | (~d & MASK_32)), (7 * j) % 16


def _compress(state: List[int], chunk: bytes) -> List[int]:
    """Run the 64 MD5 steps over one block and fold the result into state."""
    m = [int.from_bytes(chunk[i:i + 4], byteorder='little') for i in range(0, 64, 4)]
    a, b, c, d = state

    for j in range(64):
        f, g = _step(j, b, c, d)
        rotated = _left_rotate(a + f + T[j] + m[g], S[j])
        a, d, c, b = d, c, b, (b + rotated) & MASK_32

    return [(s + v) & MASK_32 for s, v in zip(state, (a, b, c, d))]


def md5(data: Data) -> bytes:
    """
    Compute the MD5 hash of the input data.

    Example:
        >>> md5(b"").hex()
        'd41d8cd98f00b204e9800998ecf8427e'
    """
    padded = pad_message(to_bytes(data), BLOCK_SIZE, 8, 'little')

    state = list(H_INITIAL)
    for chunk in split_blocks(padded, BLOCK_SIZE):
        state = _compress(state, chunk)

    return b''.join(word.to_bytes(4, byteorder='little') for word in state)


def md5_hex(data: Data) -> str:
    """Compute MD5 hash as a 32-character uppercase hex string."""
    return bytes_to_hex(md5(data))
