"""Core data contracts: the algorithm enumeration and the salted digest value."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

from pydantic import BaseModel, Field, model_validator

from strhash.core.defaults import DIGEST_SIZES
from strhash.core.errors import MalformedDigestError, UnsupportedAlgorithmError


class DigestAlgorithm(StrEnum):
    """Closed set of supported one-way hash functions.

    Member values are :mod:`hashlib` constructor names.  Do NOT add members
    whose digest size is missing from :data:`~strhash.core.defaults.DIGEST_SIZES`.
    """

    DIGEST_128 = "md5"
    DIGEST_256 = "sha256"
    DIGEST_512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Native digest length in bytes (also the salt length)."""
        return DIGEST_SIZES[self.value]

    @property
    def hex_length(self) -> int:
        """Length of the lowercase hex rendering of one digest."""
        return self.digest_size * 2


ALGORITHMS: Final[tuple[DigestAlgorithm, ...]] = tuple(DigestAlgorithm)


def resolve_algorithm(selector: DigestAlgorithm | str) -> DigestAlgorithm:
    """Map *selector* onto a :class:`DigestAlgorithm` member.

    Accepts a member, a member value (``"sha256"``) or a member name
    (``"DIGEST_256"``), case-insensitively.

    Raises:
        UnsupportedAlgorithmError: *selector* names no supported algorithm.
    """
    if isinstance(selector, DigestAlgorithm):
        return selector
    if isinstance(selector, str):
        key = selector.strip()
        for member in DigestAlgorithm:
            if key.lower() == member.value or key.upper() == member.name:
                return member
    raise UnsupportedAlgorithmError(selector)


class SaltedDigest(BaseModel, frozen=True):
    """A digest together with the salt that produced it.

    The rendered form is ``salt_hex + digest_hex`` with no separator.  Both
    halves always have the same length, so :meth:`parse` recovers them by
    splitting the stored string at its midpoint.
    """

    algorithm: DigestAlgorithm
    salt_hex: str = Field(description="Hex rendering of the random salt.")
    digest_hex: str = Field(description="Hex digest of salt_hex + plaintext.")

    @model_validator(mode="after")
    def _check_halves(self) -> SaltedDigest:
        if len(self.salt_hex) != len(self.digest_hex):
            raise ValueError(
                f"salt_hex ({len(self.salt_hex)}) and digest_hex "
                f"({len(self.digest_hex)}) must have equal length"
            )
        if len(self.digest_hex) < self.algorithm.hex_length:
            raise ValueError(
                f"digest_hex shorter than {self.algorithm.hex_length} chars "
                f"required by {self.algorithm.name}"
            )
        return self

    def render(self) -> str:
        return self.salt_hex + self.digest_hex

    @classmethod
    def parse(cls, value: str, algorithm: DigestAlgorithm | str) -> SaltedDigest:
        """Split a stored salted digest into its salt and digest halves.

        Args:
            value: String previously produced by
                :func:`~strhash.core.salting.compute_salted_digest`.
            algorithm: Algorithm the value was produced with.

        Returns:
            The parsed value.  Case is preserved; comparison is the
            verifier's concern.

        Raises:
            MalformedDigestError: *value* is empty, has odd length, or is
                shorter than two digests of *algorithm*.
        """
        algo = resolve_algorithm(algorithm)
        size = len(value)
        if size == 0:
            raise MalformedDigestError(
                "Salted digest is empty", value_length=size, algorithm=algo.name,
            )
        if size % 2:
            raise MalformedDigestError(
                f"Salted digest has odd length {size}",
                value_length=size, algorithm=algo.name,
            )
        minimum = algo.hex_length * 2
        if size < minimum:
            raise MalformedDigestError(
                f"Salted digest has length {size}, {algo.name} needs at least {minimum}",
                value_length=size, algorithm=algo.name,
            )
        middle = size // 2
        return cls(algorithm=algo, salt_hex=value[:middle], digest_hex=value[middle:])
