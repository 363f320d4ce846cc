"""Verification of candidate text against stored plain or salted digests."""

from __future__ import annotations

import hmac
import logging

from strhash.core.digest import compute_digest, require_text
from strhash.core.types import DigestAlgorithm, SaltedDigest, resolve_algorithm

logger = logging.getLogger(__name__)


def digests_match(expected: str, actual: str) -> bool:
    """Case-insensitive comparison of two hex digests.

    Letters are folded to lowercase before a constant-time comparison, so
    ``"ABC"`` and ``"abc"`` match and timing does not reveal the position of
    the first differing character.
    """
    return hmac.compare_digest(
        expected.lower().encode("utf-8"),
        actual.lower().encode("utf-8"),
    )


def verify(algorithm: DigestAlgorithm | str, text: str, digest: str) -> bool:
    """Return whether *text* hashes to *digest* under *algorithm*.

    Raises:
        UnsupportedAlgorithmError: *algorithm* is not supported.
        InvalidInputError: *text* or *digest* is not a ``str``.
    """
    algo = resolve_algorithm(algorithm)
    require_text(digest, "digest")
    return digests_match(digest, compute_digest(algo, text))


def verify_salted(algorithm: DigestAlgorithm | str, text: str, salted_digest: str) -> bool:
    """Return whether *text* matches a value from :func:`~strhash.core.salting.compute_salted_digest`.

    The salt is the first half of *salted_digest*; the expected digest is
    the second half.  The salt is rehashed exactly as stored; only the
    digest comparison ignores case.

    Raises:
        UnsupportedAlgorithmError: *algorithm* is not supported.
        InvalidInputError: *text* or *salted_digest* is not a ``str``.
        MalformedDigestError: *salted_digest* is empty, odd-length, or too
            short for *algorithm*.
    """
    algo = resolve_algorithm(algorithm)
    require_text(text)
    stored = SaltedDigest.parse(require_text(salted_digest, "salted_digest"), algo)
    matched = digests_match(stored.digest_hex, compute_digest(algo, stored.salt_hex + text))
    if not matched:
        logger.debug("Salted %s verification failed", algo.name)
    return matched
