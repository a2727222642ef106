"""Identity string helpers."""

from __future__ import annotations

ANONYMOUS = "Anonymous"
DOMAIN_SEPARATOR = "\\"


def normalize_identity(name: str | None) -> str:
    """Reduce an identity string to the bare user name.

    ``DOMAIN\\user`` becomes ``user``. Only the first separator is
    stripped, so ``a\\b\\c`` becomes ``b\\c``. Missing or empty input
    yields ``ANONYMOUS``.

    Example:
        >>> normalize_identity("CORP\\\\alice")
        'alice'
        >>> normalize_identity(None)
        'Anonymous'
    """
    if not name:
        return ANONYMOUS
    _, separator, rest = name.partition(DOMAIN_SEPARATOR)
    return rest if separator else name
