"""
SHA-512 / SHA-384 Hash Implementation (From Scratch)

Implements the 64-bit SHA-2 family as defined in FIPS 180-4. SHA-384 runs the
SHA-512 compression core with its own initial hash values and truncates the
output to the first 48 bytes.

Components:
- Padding: Pads message to multiple of 1024 bits with a 128-bit length field
- Message Schedule: Expands 16 64-bit words to 80 words
- Compression: 80 rounds of compression function
- Output: 512-bit (64-byte) or 384-bit (48-byte) digest
"""

from typing import List, Sequence

from .encoding import Data, bytes_to_hex, to_bytes
from .padding import pad_message, split_blocks


BLOCK_SIZE = 128
SHA512_DIGEST_SIZE = 64
SHA384_DIGEST_SIZE = 48

# First 64 bits of fractional parts of square roots of first 8 primes
SHA512_H_INITIAL = (
    0x6a09e667f3bcc908, 0xbb67ae8584caa73b, 0x3c6ef372fe94f82b, 0xa54ff53a5f1d36f1,
    0x510e527fade682d1, 0x9b05688c2b3e6c1f, 0x1f83d9abfb41bd6b, 0x5be0cd19137e2179,
)

# First 64 bits of fractional parts of square roots of the 9th through 16th primes
SHA384_H_INITIAL = (
    0xcbbb9d5dc1059ed8, 0x629a292a367cd507, 0x9159015a3070dd17, 0x152fecd8f70e5939,
    0x67332667ffc00b31, 0x8eb44a8768581511, 0xdb0c2e0d64f98fa7, 0x47b5481dbefa4fa4,
)

# Round constants: first 64 bits of fractional parts of cube roots of first 80 primes
K = (
    0x428a2f98d728ae22, 0x7137449123ef65cd, 0xb5c0fbcfec4d3b2f, 0xe9b5dba58189dbbc,
    0x3956c25bf348b538, 0x59f111f1b605d019, 0x923f82a4af194f9b, 0xab1c5ed5da6d8118,
    0xd807aa98a3030242, 0x12835b0145706fbe, 0x243185be4ee4b28c, 0x550c7dc3d5ffb4e2,
    0x72be5d74f27b896f, 0x80deb1fe3b1696b1, 0x9bdc06a725c71235, 0xc19bf174cf692694,
    0xe49b69c19ef14ad2, 0xefbe4786384f25e3, 0x0fc19dc68b8cd5b5, 0x240ca1cc77ac9c65,
    0x2de92c6f592b0275, 0x4a7484aa6ea6e483, 0x5cb0a9dcbd41fbd4, 0x76f988da831153b5,
    0x983e5152ee66dfab, 0xa831c66d2db43210, 0xb00327c898fb213f, 0xbf597fc7beef0ee4,
    0xc6e00bf33da88fc2, 0xd5a79147930aa725, 0x06ca6351e003826f, 0x142929670a0e6e70,
    0x27b70a8546d22ffc, 0x2e1b21385c26c926, 0x4d2c6dfc5ac42aed, 0x53380d139d95b3df,
    0x650a73548baf63de, 0x766a0abb3c77b2a8, 0x81c2c92e47edaee6, 0x92722c851482353b,
    0xa2bfe8a14cf10364, 0xa81a664bbc423001, 0xc24b8b70d0f89791, 0xc76c51a30654be30,
    0xd192e819d6ef5218, 0xd69906245565a910, 0xf40e35855771202a, 0x106aa07032bbd1b8,
    0x19a4c116b8d2d0c8, 0x1e376c085141ab53, 0x2748774cdf8eeb99, 0x34b0bcb5e19b48a8,
    0x391c0cb3c5c95a63, 0x4ed8aa4ae3418acb, 0x5b9cca4f7763e373, 0x682e6ff3d6b2b8a3,
    0x748f82ee5defb2fc, 0x78a5636f43172f60, 0x84c87814a1f0ab72, 0x8cc702081a6439ec,
    0x90befffa23631e28, 0xa4506cebde82bde9, 0xbef9a3f7b2c67915, 0xc67178f2e372532b,
    0xca273eceea26619c, 0xd186b8c721c0c207, 0xeada7dd6cde0eb1e, 0xf57d4f7fee6ed178,
    0x06f067aa72176fba, 0x0a637dc5a2c898a6, 0x113f9804bef90dae, 0x1b710b35131c471b,
    0x28db77f523047d84, 0x32caab7b40c72493, 0x3c9ebe0a15c9bebc, 0x431d67c49c100d4c,
    0x4cc5d4becb3e42b6, 0x597f299cfc657e2a, 0x5fcb6fab3ad6faec, 0x6c44198c4a475817,
)

# Mask for 64-bit arithmetic
MASK_64 = 0xFFFFFFFFFFFFFFFF


def _right_rotate(value: int, amount: int) -> int:
    """Right rotate a 64-bit integer by the specified amount."""
    return ((value >> amount) | (value << (64 - amount))) & MASK_64


def _sigma0(x: int) -> int:
    return _right_rotate(x, 1) ^ _right_rotate(x, 8) ^ (x >> 7)


def _sigma1(x: int) -> int:
    return _right_rotate(x, 19) ^ _right_rotate(x, 61) ^ (x >> 6)


def _big_sigma0(x: int) -> int:
    return _right_rotate(x, 28) ^ _right_rotate(x, 34) ^ _right_rotate(x, 39)


def _big_sigma1(x: int) -> int:
    return _right_rotate(x, 14) ^ _right_rotate(x, 18) ^ _right_rotate(x, 41)


def _create_message_schedule(chunk: bytes) -> List[int]:
    """Expand a 128-byte chunk into 80 64-bit words (big-endian)."""
    w = [int.from_bytes(chunk[i:i + 8], byteorder='big') for i in range(0, 128, 8)]
    for i in range(16, 80):
        w.append((w[i - 16] + _sigma0(w[i - 15]) + w[i - 7] + _sigma1(w[i - 2])) & MASK_64)
    return w


def _compress(state: List[int], w: List[int]) -> List[int]:
    """Perform 80 rounds of compression and fold the result into state."""
    a, b, c, d, e, f, g, h = state

    for i in range(80):
        ch = (e & f) ^ (~e & g & MASK_64)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t1 = (h + _big_sigma1(e) + ch + K[i] + w[i]) & MASK_64
        t2 = (_big_sigma0(a) + maj) & MASK_64

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_64
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_64

    return [(s + v) & MASK_64 for s, v in zip(state, (a, b, c, d, e, f, g, h))]


def _sha512_core(data: bytes, initial: Sequence[int], digest_size: int) -> bytes:
    """Run the shared 64-bit core and truncate to digest_size bytes."""
    padded = pad_message(data, BLOCK_SIZE, 16, 'big')

    state = list(initial)
    for chunk in split_blocks(padded, BLOCK_SIZE):
        state = _compress(state, _create_message_schedule(chunk))

    digest = b''.join(word.to_bytes(8, byteorder='big') for word in state)
    return digest[:digest_size]


def sha512(data: Data) -> bytes:
    """
    Compute the SHA-512 hash of the input data.

    Returns:
        512-bit (64-byte) digest as bytes
    """
    return _sha512_core(to_bytes(data), SHA512_H_INITIAL, SHA512_DIGEST_SIZE)


def sha384(data: Data) -> bytes:
    """
    Compute the SHA-384 hash of the input data.

    Returns:
        384-bit (48-byte) digest as bytes
    """
    return _sha512_core(to_bytes(data), SHA384_H_INITIAL, SHA384_DIGEST_SIZE)


def sha512_hex(data: Data) -> str:
    """Compute SHA-512 hash as a 128-character uppercase hex string."""
    return bytes_to_hex(sha512(data))


def sha384_hex(data: Data) -> str:
    """Compute SHA-384 hash as a 96-character uppercase hex string."""
    return bytes_to_hex(sha384(data))
