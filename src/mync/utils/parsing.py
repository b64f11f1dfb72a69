r"""Parsing utilities for ``key=value`` command line values."""

from __future__ import annotations

__all__ = ["parse_key_value"]

from mync.exceptions import ErrorKind, InvalidInputError


def parse_key_value(raw: str, kind: ErrorKind) -> tuple[str, str]:
    """Split a ``key=value`` string on the first ``=``.

    Only the first ``=`` separates the key from the value, so values
    may themselves contain ``=`` (e.g. passwords or base64 tokens).

    Args:
        raw: The string to split.
        kind: The error kind to raise if ``raw`` is malformed.

    Returns:
        The ``(key, value)`` pair. The value may be empty.

    Raises:
        InvalidInputError: If ``raw`` has no ``=`` or an empty key.

    Example:
        ```pycon
        >>> from mync.exceptions import ErrorKind
        >>> from mync.utils.parsing import parse_key_value
        >>> parse_key_value("user=pa=ss", ErrorKind.MALFORMED_BASIC_AUTH)
        ('user', 'pa=ss')

        ```
    """
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise InvalidInputError(kind)
    return key, value
