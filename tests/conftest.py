"""Shared fixtures for the strhash test suite."""

from __future__ import annotations

import pytest

from strhash.core.types import ALGORITHMS, DigestAlgorithm

# Published test vectors (RFC 1321, FIPS 180-2).
KNOWN_VECTORS: dict[tuple[DigestAlgorithm, str], str] = {
    (DigestAlgorithm.DIGEST_128, ""): "d41d8cd98f00b204e9800998ecf8427e",
    (DigestAlgorithm.DIGEST_128, "abc"): "900150983cd24fb0d6963f7d28e17f72",
    (DigestAlgorithm.DIGEST_256, ""): (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    ),
    (DigestAlgorithm.DIGEST_256, "abc"): (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    ),
    (DigestAlgorithm.DIGEST_512, ""): (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
    (DigestAlgorithm.DIGEST_512, "abc"): (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
        "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
    ),
}

SAMPLE_TEXTS: tuple[str, ...] = (
    "",
    "abc",
    "correct horse battery staple",
    "unicode: Ωüñ 漢字 🙂",
    "a" * 1000,
)


@pytest.fixture(params=ALGORITHMS, ids=lambda a: a.name)
def algorithm(request: pytest.FixtureRequest) -> DigestAlgorithm:
    return request.param


@pytest.fixture(params=SAMPLE_TEXTS, ids=["empty", "abc", "phrase", "unicode", "long"])
def sample_text(request: pytest.FixtureRequest) -> str:
    return request.param
