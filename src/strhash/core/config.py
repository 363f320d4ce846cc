"""Persisted CLI settings.

Stores per-install defaults as a JSON file inside a config directory.
Only the command line reads it; the hashing functions never touch disk.

Typical location::

    .strhash/config.json

Usage::

    from strhash.core.config import HasherConfig

    cfg = HasherConfig(config_dir)
    cfg.default_algorithm                  # DigestAlgorithm.DIGEST_256 until changed
    cfg.default_algorithm = "sha512"       # validated, persists immediately
    cfg.as_dict()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from strhash.core.defaults import CONFIG_FILENAME, DEFAULT_ALGORITHM, DEFAULT_CONFIG_DIR
from strhash.core.errors import UnsupportedAlgorithmError
from strhash.core.types import DigestAlgorithm, resolve_algorithm

logger = logging.getLogger(__name__)


class HasherConfig:
    """Read/write access to ``config.json`` in a config directory.

    Nothing is written until a setting changes.  The file is plain JSON so
    it can be hand-edited; an unreadable file or an unknown stored
    algorithm falls back to the defaults with a warning.
    """

    def __init__(self, config_dir: Path | str = DEFAULT_CONFIG_DIR) -> None:
        self._path = Path(config_dir) / CONFIG_FILENAME
        self._data: dict[str, Any] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        if self._path.exists():
            try:
                data = json.loads(self._path.read_text("utf-8"))
            except (json.JSONDecodeError, OSError):
                logger.warning("Corrupt config at %s; using defaults", self._path)
                return {}
            if isinstance(data, dict):
                return data
            logger.warning("Config at %s is not a JSON object; using defaults", self._path)
        return {}

    def _persist(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._data, indent=2) + "\n", "utf-8")

    # -- default_algorithm -----------------------------------------------------

    @property
    def default_algorithm(self) -> DigestAlgorithm:
        stored = self._data.get("default_algorithm", DEFAULT_ALGORITHM)
        try:
            return resolve_algorithm(stored)
        except UnsupportedAlgorithmError:
            logger.warning("Unknown default_algorithm %r in %s; using %s", stored, self._path, DEFAULT_ALGORITHM)
            return resolve_algorithm(DEFAULT_ALGORITHM)

    @default_algorithm.setter
    def default_algorithm(self, value: DigestAlgorithm | str) -> None:
        self._data["default_algorithm"] = resolve_algorithm(value).value
        self._persist()

    # -- generic helpers -------------------------------------------------------

    def as_dict(self) -> dict[str, Any]:
        return {
            **{k: v for k, v in self._data.items() if k != "default_algorithm"},
            "default_algorithm": self.default_algorithm.value,
        }
