"""
HMAC Implementation (RFC 2104)

Generic keyed-hash construction over any registered digest engine:

    HMAC(K, m) = H((K' ^ opad) || H((K' ^ ipad) || m))

where K' is the key hashed down (if longer than the block size) and then
zero-padded to exactly one block. The inner digest is fed to the outer digest
as raw bytes; hex rendering happens only in hmac_hex.
"""

from typing import Union

from .algorithms import Algorithm, get_descriptor
from .encoding import Data, bytes_to_hex, to_bytes


IPAD_BYTE = 0x36
OPAD_BYTE = 0x5C


def _xor_pad(key: bytes, pad_byte: int) -> bytes:
    """XOR every key byte with a constant pad byte."""
    return bytes(b ^ pad_byte for b in key)


def hmac_digest(algo: Union[Algorithm, str], msg: Data, key: Data) -> bytes:
    """
    Compute HMAC and return the raw tag.

    Args:
        algo: Algorithm member or name (e.g. "sha256")
        msg: Message text or bytes
        key: Key text or bytes

    Returns:
        Tag bytes, digest_size long for the chosen algorithm

    Raises:
        UnknownAlgorithm: If algo is not a supported algorithm
        InvalidInputType: If msg or key is neither text nor bytes
    """
    descriptor = get_descriptor(algo)
    hash_fn = descriptor.digest
    block_size = descriptor.block_size

    msg_bytes = to_bytes(msg)
    key_bytes = to_bytes(key)

    if len(key_bytes) > block_size:
        key_bytes = hash_fn(key_bytes)
    key_bytes = key_bytes.ljust(block_size, b'\x00')

    ipad = _xor_pad(key_bytes, IPAD_BYTE)
    opad = _xor_pad(key_bytes, OPAD_BYTE)

    inner = hash_fn(ipad + msg_bytes)
    return hash_fn(opad + inner)


def hmac_hex(algo: Union[Algorithm, str], msg: Data, key: Data) -> str:
    """Compute HMAC and return it as uppercase hex."""
    return bytes_to_hex(hmac_digest(algo, msg, key))
