"""Centralised default constants for strhash.

Every project-wide magic number / string lives here.
Import these instead of hard-coding values in function signatures or CLI options.
"""

from __future__ import annotations

from typing import Final

# ── Encoding ──
TEXT_ENCODING: Final[str] = "utf-8"

# ── Algorithms ──
DEFAULT_ALGORITHM: Final[str] = "sha256"

# hashlib constructor name -> native digest size in bytes.
# Salt size always equals digest size so a salted digest splits at its midpoint.
DIGEST_SIZES: Final[dict[str, int]] = {
    "md5": 16,
    "sha256": 32,
    "sha512": 64,
}

# ── Paths ──
DEFAULT_CONFIG_DIR: Final[str] = ".strhash"
CONFIG_FILENAME: Final[str] = "config.json"

# ── CLI exit codes ──
EXIT_MISMATCH: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2
