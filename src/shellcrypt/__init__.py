"""
shellcrypt - Cryptographic primitives written from scratch.

Public functional surface. Digest functions here return uppercase hex; the
raw-byte engines live in shellcrypt.core_crypto for composition.

    >>> import shellcrypt
    >>> shellcrypt.sha1("")
    'DA39A3EE5E6B4B0D3255BFEF95601890AFD80709'
    >>> shellcrypt.base64("Hello", 0)
    'SGVsbG8='
"""

from .core_crypto.algorithms import Algorithm
from .core_crypto.base64_codec import Base64Mode, base64
from .core_crypto.compare import compare
from .core_crypto.errors import (
    CryptError,
    DecodeFormatError,
    InvalidInputType,
    ResourceOpenFailure,
    ShortReadFailure,
    UnknownAlgorithm,
)
from .core_crypto.hmac import hmac_hex as hmac
from .core_crypto.md5 import md5_hex as md5
from .core_crypto.sha1 import sha1_hex as sha1
from .core_crypto.sha256 import sha256_hex as sha256
from .core_crypto.sha512 import sha384_hex as sha384, sha512_hex as sha512
from .files.byte_reader import byte_dump, hash_file, random_bytes


__version__ = "1.0.0"

__all__ = [
    'md5',
    'sha1',
    'sha256',
    'sha384',
    'sha512',
    'hmac',
    'base64',
    'compare',
    'byte_dump',
    'random_bytes',
    'hash_file',
    'Algorithm',
    'Base64Mode',
    'CryptError',
    'InvalidInputType',
    'UnknownAlgorithm',
    'DecodeFormatError',
    'ResourceOpenFailure',
    'ShortReadFailure',
]
