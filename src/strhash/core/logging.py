"""Sanitizing log filter that keeps salts, plaintext, and stored digests out of log output.

The library itself only logs algorithm names and sizes.  This filter guards
against callers (or future code) interpolating secrets into log messages.
"""

from __future__ import annotations

import logging
import re
from typing import Final

_SENSITIVE_KEYS: Final[tuple[str, ...]] = (
    "salted_digest",
    "salt_hex",
    "salt",
    "plaintext",
    "candidate",
    "password",
    "secret",
    "text",
)

_REDACTED: Final[str] = "[REDACTED]"

# Shortest salt / digest rendering (DIGEST_128) is 32 hex chars.
_MIN_HEX_RUN: Final[int] = 32

_SENSITIVE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(?P<key>"
    + "|".join(re.escape(k) for k in _SENSITIVE_KEYS)
    + r")\s*[=:]\s*(?P<value>\"[^\"]*\"|'[^']*'|\S+)",
    re.IGNORECASE,
)

_HEX_RUN_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"\b[0-9a-fA-F]{{{_MIN_HEX_RUN},}}\b",
)


def redact_message(message: str, *, redact_hex: bool = True) -> str:
    """Mask salts, plaintext and stored digests inside one log line.

    Values assigned to a sensitive key (``salt=...``, ``password: ...``) are
    masked; the key itself is kept so the line still reads sensibly.

    Args:
        message: Fully formatted log line.
        redact_hex: Also replace bare hex runs long enough to be a salt or
            digest.

    Returns:
        The line with every masked value shown as ``[REDACTED]``.
    """
    result = _SENSITIVE_PATTERN.sub(
        lambda m: f"{m.group('key')}={_REDACTED}", message,
    )
    if redact_hex:
        result = _HEX_RUN_PATTERN.sub(_REDACTED, result)
    return result


class SanitizingFilter(logging.Filter):
    """Formats each record once and passes it on with secrets masked.

    Records are never dropped.  Arguments are folded into ``msg`` first, so
    a salt passed as a ``%s`` argument is masked too.
    """

    def __init__(self, *, redact_hex: bool = True) -> None:
        super().__init__()
        self.redact_hex = redact_hex

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = redact_message(record.getMessage(), redact_hex=self.redact_hex)
            record.args = None
        else:
            record.msg = redact_message(str(record.msg), redact_hex=self.redact_hex)
        return True


def install_sanitizing_filter(
    logger: logging.Logger | None = None,
    *,
    handler_level: bool = False,
    redact_hex: bool = True,
) -> SanitizingFilter:
    """Mask secrets in everything *logger* emits.

    The CLI calls this on the root logger with ``handler_level=True`` so
    records from ``strhash.*`` child loggers are covered as well.

    Args:
        logger: Logger to guard; the root logger when ``None``.
        handler_level: Attach to every current handler of *logger* rather
            than to *logger*.  Propagated records bypass logger-level
            filters, so this is the mode to use on the root logger.
        redact_hex: Whether bare salt- or digest-length hex runs are masked.

    Returns:
        The attached filter, so callers can detach it again.
    """
    filt = SanitizingFilter(redact_hex=redact_hex)
    target = logger or logging.getLogger()

    if handler_level:
        for handler in target.handlers:
            handler.addFilter(filt)
    else:
        target.addFilter(filt)

    return filt
