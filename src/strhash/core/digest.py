"""Deterministic hex digests of text under a selectable hash algorithm."""

from __future__ import annotations

import hashlib
import logging

from strhash.core.defaults import TEXT_ENCODING
from strhash.core.errors import InvalidInputError
from strhash.core.types import DigestAlgorithm, resolve_algorithm

logger = logging.getLogger(__name__)


def require_text(value: object, name: str = "text") -> str:
    """Return *value* unchanged if it is a ``str``, else raise :class:`InvalidInputError`."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be str, got {type(value).__name__}")
    return value


def digest_size(algorithm: DigestAlgorithm | str) -> int:
    """Native digest length of *algorithm* in bytes."""
    return resolve_algorithm(algorithm).digest_size


def hex_length(algorithm: DigestAlgorithm | str) -> int:
    """Length of the hex string returned by :func:`compute_digest`."""
    return resolve_algorithm(algorithm).hex_length


def compute_digest(algorithm: DigestAlgorithm | str, text: str) -> str:
    """Lowercase hex digest of *text* encoded as UTF-8.

    Pure function of ``(algorithm, text)``: identical inputs always produce
    identical output, and no state survives the call.

    Args:
        algorithm: A :class:`DigestAlgorithm` member, value, or name.
        text: String to hash.  May be empty.

    Returns:
        Hex string of 32 (``DIGEST_128``), 64 (``DIGEST_256``) or 128
        (``DIGEST_512``) characters, two per byte, most-significant nibble
        first.

    Raises:
        UnsupportedAlgorithmError: *algorithm* is not supported.
        InvalidInputError: *text* is not a ``str``.
    """
    algo = resolve_algorithm(algorithm)
    payload = require_text(text).encode(TEXT_ENCODING)
    # Fresh hash object per call, dropped when the function returns.
    result = hashlib.new(algo.value, payload).hexdigest()
    logger.debug("Computed %s digest over %d bytes", algo.name, len(payload))
    return result
