"""Random salting on top of :mod:`strhash.core.digest`.

The salt travels with the result: the returned string is the salt's hex
rendering followed by the digest of ``salt_hex + text``.  Because the salt is
exactly as long as the algorithm's digest, both halves have equal length and
the verifier can recover the salt without a separator.
"""

from __future__ import annotations

import logging
import secrets

from strhash.core.digest import compute_digest, require_text
from strhash.core.types import DigestAlgorithm, SaltedDigest, resolve_algorithm

logger = logging.getLogger(__name__)


def generate_salt(algorithm: DigestAlgorithm | str) -> str:
    """Hex rendering of a fresh CSPRNG salt sized to *algorithm*'s digest."""
    algo = resolve_algorithm(algorithm)
    return secrets.token_bytes(algo.digest_size).hex()


def salt_digest(algorithm: DigestAlgorithm | str, text: str) -> SaltedDigest:
    """Hash *text* under a new random salt and return both parts.

    Raises:
        UnsupportedAlgorithmError: *algorithm* is not supported.
        InvalidInputError: *text* is not a ``str``.
    """
    algo = resolve_algorithm(algorithm)
    require_text(text)
    salt_hex = generate_salt(algo)
    digest_hex = compute_digest(algo, salt_hex + text)
    logger.debug("Salted %s digest with %d-byte salt", algo.name, algo.digest_size)
    return SaltedDigest(algorithm=algo, salt_hex=salt_hex, digest_hex=digest_hex)


def compute_salted_digest(algorithm: DigestAlgorithm | str, text: str) -> str:
    """``salt_hex + digest_hex`` for *text* under a fresh salt.

    The result is always exactly twice as long as :func:`compute_digest`
    would return for the same algorithm.
    """
    return salt_digest(algorithm, text).render()
