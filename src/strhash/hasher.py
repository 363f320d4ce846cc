"""Algorithm-bound facade over the digest, salting, and verification functions.

Usage::

    from strhash.hasher import SHA256, StringHasher

    stored = SHA256.compute_salted("hunter2")
    SHA256.verify_salted("hunter2", stored)   # True

    StringHasher("md5").compute("")           # "d41d8cd98f00b204e9800998ecf8427e"
"""

from __future__ import annotations

from typing import Final

from strhash.core.digest import compute_digest
from strhash.core.salting import compute_salted_digest
from strhash.core.types import DigestAlgorithm, resolve_algorithm
from strhash.core.verify import verify, verify_salted


class StringHasher:
    """One :class:`DigestAlgorithm` with the four public operations bound to it.

    Holds nothing but the algorithm, so a single instance may be shared
    freely between threads.
    """

    __slots__ = ("_algorithm",)

    def __init__(self, algorithm: DigestAlgorithm | str) -> None:
        self._algorithm = resolve_algorithm(algorithm)

    @property
    def algorithm(self) -> DigestAlgorithm:
        return self._algorithm

    def compute(self, text: str) -> str:
        return compute_digest(self._algorithm, text)

    def compute_salted(self, text: str) -> str:
        return compute_salted_digest(self._algorithm, text)

    def verify(self, text: str, digest: str) -> bool:
        return verify(self._algorithm, text, digest)

    def verify_salted(self, text: str, salted_digest: str) -> bool:
        return verify_salted(self._algorithm, text, salted_digest)

    def __repr__(self) -> str:
        return f"StringHasher({self._algorithm.name})"


MD5: Final[StringHasher] = StringHasher(DigestAlgorithm.DIGEST_128)
SHA256: Final[StringHasher] = StringHasher(DigestAlgorithm.DIGEST_256)
SHA512: Final[StringHasher] = StringHasher(DigestAlgorithm.DIGEST_512)
