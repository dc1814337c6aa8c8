"""
Error taxonomy for shellcrypt.

Every failure aborts the current call; nothing partially succeeds. Each error
also derives from the built-in exception of the same category so callers
that already catch TypeError / ValueError / OSError keep working.
"""


class CryptError(Exception):
    """Base class for all shellcrypt errors."""
    pass


class InvalidInputType(CryptError, TypeError):
    """Raised when input is neither text nor a bytes-like buffer."""
    pass


class UnknownAlgorithm(CryptError, ValueError):
    """Raised when an algorithm name does not map to a digest engine."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown hash algorithm: {name!r}")


class DecodeFormatError(CryptError, ValueError):
    """Raised when Base64 input is structurally invalid after stripping."""
    pass


class ResourceOpenFailure(CryptError, OSError):
    """Raised when a file or the entropy device cannot be opened."""
    pass


class ShortReadFailure(CryptError, OSError):
    """Raised when the entropy device runs dry before enough bytes arrive."""
    pass
