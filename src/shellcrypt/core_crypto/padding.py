"""
Merkle-Damgard message padding shared by every digest engine.

Padding rules:
1. Append bit '1' to the message (0x80 byte)
2. Append zeros until the length leaves exactly `length_size` bytes free in
   the final block
3. Append the original message length in bits as a `length_size`-byte
   integer (big-endian for the SHA family, little-endian for MD5)
"""


def pad_message(data: bytes, block_size: int = 64, length_size: int = 8,
                byteorder: str = 'big') -> bytes:
    """
    Pad a message to a whole number of blocks.

    Args:
        data: The original message bytes
        block_size: Block size in bytes (64 or 128)
        length_size: Bytes reserved for the bit length (8 or 16)
        byteorder: Byte order of the length field ('big' or 'little')

    Returns:
        Padded message whose length is a multiple of block_size

    Example:
        >>> len(pad_message(b"abc"))
        64
        >>> len(pad_message(b"a" * 56))
        128
    """
    # Length is taken modulo 2^(8 * length_size)
    original_bit_length = (len(data) * 8) & ((1 << (8 * length_size)) - 1)

    # We need: (len(data) + 1 + zeros) % block_size == block_size - length_size
    zeros = (block_size - length_size - (len(data) + 1)) % block_size

    return (
        data +
        b'\x80' +
        b'\x00' * zeros +
        original_bit_length.to_bytes(length_size, byteorder=byteorder)
    )


def split_blocks(data: bytes, block_size: int):
    """Yield consecutive block_size chunks of a padded message."""
    for i in range(0, len(data), block_size):
        yield data[i:i + block_size]
