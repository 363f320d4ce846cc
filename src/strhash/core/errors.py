"""Exception hierarchy raised by the hashing, salting, and verification layers."""

from __future__ import annotations


class StringHashError(Exception):
    """Base class for every error raised by strhash."""


class UnsupportedAlgorithmError(StringHashError, ValueError):
    """Raised when an algorithm selector is outside :class:`~strhash.core.types.DigestAlgorithm`."""

    def __init__(self, selector: object) -> None:
        super().__init__(f"Unsupported digest algorithm: {selector!r}")
        self.selector = selector


class InvalidInputError(StringHashError, TypeError):
    """Raised when text or a stored digest is not a ``str``."""


class MalformedDigestError(StringHashError, ValueError):
    """Raised when a stored salted digest fails structural validation.

    Distinguishes a corrupt stored value from a legitimate mismatch, which
    is reported as ``False`` by the verifier instead.
    """

    def __init__(self, message: str, *, value_length: int, algorithm: str) -> None:
        super().__init__(message)
        self.value_length = value_length
        self.algorithm = algorithm
