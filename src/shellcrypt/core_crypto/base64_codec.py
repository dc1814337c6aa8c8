"""
Base64 Codec (RFC 4648, standard alphabet)

Encode:
- Text is UTF-8 encoded first (surrogate pairs joined, see encoding.to_bytes);
  a lone surrogate is written in its 3-byte form rather than rejected
- Every 3 bytes become 4 symbols; a short final group is padded with '='

Decode:
- Characters outside the alphabet and '=' are stripped (whitespace, line
  breaks, stray punctuation)
- What remains must be whole 4-symbol groups with '=' only at the very end,
  otherwise DecodeFormatError is raised
- The text variant reassembles the bytes as UTF-8
"""

import re
from enum import IntEnum
from typing import Union

from .encoding import Data, to_bytes
from .errors import DecodeFormatError


BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD_CHAR = "="

_DECODE_TABLE = {ch: i for i, ch in enumerate(BASE64_ALPHABET)}
_STRIP_RE = re.compile(r'[^A-Za-z0-9+/=]')


class Base64Mode(IntEnum):
    """Direction selector for base64()."""
    ENCODE = 0
    DECODE = 1


def base64_encode(data: Data) -> str:
    """
    Encode text or bytes as Base64.

    Example:
        >>> base64_encode("Hello")
        'SGVsbG8='
    """
    raw = to_bytes(data, errors='surrogatepass')
    out = []

    for i in range(0, len(raw), 3):
        group = raw[i:i + 3]
        n = int.from_bytes(group.ljust(3, b'\x00'), byteorder='big')
        symbols = [BASE64_ALPHABET[(n >> shift) & 0x3F] for shift in (18, 12, 6, 0)]
        # 1 input byte -> 2 symbols, 2 -> 3, 3 -> 4
        keep = len(group) + 1
        out.append(''.join(symbols[:keep]) + PAD_CHAR * (4 - keep))

    return ''.join(out)


def _clean(text: Data) -> str:
    if not isinstance(text, str):
        text = to_bytes(text).decode('latin-1')
    return _STRIP_RE.sub('', text)


def base64_decode_bytes(text: Data) -> bytes:
    """
    Decode Base64 into raw bytes.

    Raises:
        DecodeFormatError: If the stripped input is not whole 4-symbol
            groups, or '=' appears anywhere but the last two positions
    """
    clean = _clean(text)

    if len(clean) % 4:
        raise DecodeFormatError(
            f"Base64 input length {len(clean)} is not a multiple of 4"
        )

    padding = len(clean) - len(clean.rstrip(PAD_CHAR))
    if padding > 2 or PAD_CHAR in clean[:len(clean) - padding]:
        raise DecodeFormatError("Misplaced '=' padding in Base64 input")

    out = bytearray()
    for i in range(0, len(clean), 4):
        n = 0
        for ch in clean[i:i + 4]:
            n = (n << 6) | _DECODE_TABLE.get(ch, 0)
        out += n.to_bytes(3, byteorder='big')

    if padding:
        del out[-padding:]
    return bytes(out)


def base64_decode(text: Data) -> str:
    """
    Decode Base64 into text.

    Example:
        >>> base64_decode("SGVsbG8=")
        'Hello'

    Raises:
        DecodeFormatError: If the input is malformed or not valid UTF-8
    """
    raw = base64_decode_bytes(text)
    try:
        return raw.decode('utf-8', 'surrogatepass')
    except UnicodeDecodeError as e:
        raise DecodeFormatError(f"Decoded Base64 is not valid UTF-8: {e}") from e


def base64(data: Data, mode: Union[Base64Mode, int] = Base64Mode.ENCODE) -> str:
    """
    Encode (mode 0) or decode (mode 1) Base64 text.

    Raises:
        ValueError: If mode is neither 0 nor 1
    """
    mode = Base64Mode(mode)
    if mode is Base64Mode.ENCODE:
        return base64_encode(data)
    return base64_decode(data)
