"""
Byte Normalization and Hex Conversion

Every digest, HMAC and codec operation consumes a canonical byte sequence.
This module turns text or byte buffers into that sequence and maps digests
to and from their uppercase hexadecimal form.

Text handling:
- Text is encoded as UTF-8
- UTF-16 surrogate pairs stored as two code points ("\\ud83d\\ude00") are
  joined into one code point above U+FFFF before encoding, so they produce a
  single 4-byte UTF-8 sequence
- A lone surrogate has no UTF-8 form and is rejected with InvalidInputType,
  unless the caller asks for errors="surrogatepass" (the Base64 encoder does)
"""

import re
import string
from typing import Union

from .errors import InvalidInputType


BytesLike = Union[bytes, bytearray, memoryview]
Data = Union[str, bytes, bytearray, memoryview]

_SURROGATE_RE = re.compile('[\ud800-\udfff]')
_HEX_DIGITS = frozenset(string.hexdigits)


def _join_surrogate_pairs(text: str) -> str:
    """Combine high/low surrogate code points into real code points."""
    if not _SURROGATE_RE.search(text):
        return text
    # UTF-16 round trip pairs adjacent surrogates and passes lone ones through
    return text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')


def to_bytes(data: Data, errors: str = 'strict') -> bytes:
    """
    Normalize text or a byte buffer into immutable bytes.

    Args:
        data: A str, or any bytes-like buffer (bytes, bytearray, memoryview)
        errors: Error handler for text encoding; "surrogatepass" keeps a lone
            surrogate as its 3-byte form

    Returns:
        The UTF-8 encoding of text, or a bytes copy of the buffer

    Raises:
        InvalidInputType: If data is neither text nor a bytes-like buffer, or
            if text holds an unpaired surrogate

    Example:
        >>> to_bytes("\\u00e9")
        b'\\xc3\\xa9'
    """
    if isinstance(data, str):
        text = _join_surrogate_pairs(data)
        try:
            return text.encode('utf-8', errors)
        except UnicodeEncodeError as e:
            raise InvalidInputType(
                f"Unpaired surrogate U+{ord(text[e.start]):04X} in text"
            ) from e
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise InvalidInputType(
        f"Input must be str or bytes-like, not {type(data).__name__}"
    )


def bytes_to_hex(data: BytesLike) -> str:
    """Render bytes as uppercase hexadecimal text."""
    return bytes(data).hex().upper()


def hex_to_bytes(text: str) -> bytes:
    """
    Parse hexadecimal text (either case) back into bytes.

    Raises:
        InvalidInputType: If text is not a str
        ValueError: If text has odd length or contains non-hex characters
    """
    if not isinstance(text, str):
        raise InvalidInputType(f"Hex input must be str, not {type(text).__name__}")
    if len(text) % 2 or not _HEX_DIGITS.issuperset(text):
        raise ValueError(f"Invalid hex string: {text!r}")
    return bytes.fromhex(text)
