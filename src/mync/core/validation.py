r"""Validation and body resolution for ``HttpConfig`` objects.

The functions of this module run before any request is built so that
invalid configurations never reach the network.
"""

from __future__ import annotations

__all__ = ["resolve_body", "validate_config", "validate_timeout"]

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from mync.core.config import ALLOWED_VERBS
from mync.exceptions import ErrorKind, InvalidInputError
from mync.utils.files import read_body_file

if TYPE_CHECKING:
    import httpx

    from mync.core.config import HttpConfig

logger: logging.Logger = logging.getLogger(__name__)


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for the server response.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from mync.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def resolve_body(config: HttpConfig) -> HttpConfig:
    """Resolve the effective request body of a configuration.

    The literal body and the body file are mutually exclusive. The
    conflict is detected before any file is opened. The body file is
    only read for POST requests.

    Args:
        config: The configuration to resolve.

    Returns:
        A configuration whose ``post_body`` holds the effective body.
            ``config`` itself is returned if there is nothing to read.

    Raises:
        InvalidInputError: If both a literal body and a body file are
            given.
        FileAccessError: If the body file cannot be read.

    Example:
        ```pycon
        >>> from mync.core.config import HttpConfig
        >>> from mync.core.validation import resolve_body
        >>> config = resolve_body(HttpConfig(url="http://localhost", post_body="{}"))
        >>> config.post_body
        '{}'

        ```
    """
    if config.body_file and config.post_body:
        raise InvalidInputError(ErrorKind.CONFLICTING_BODY_SOURCES)
    if not config.body_file:
        return config
    if not config.is_post:
        logger.warning(f"Ignoring body file {config.body_file} for {config.verb} request")
        return config
    return replace(config, post_body=read_body_file(config.body_file))


def validate_config(config: HttpConfig) -> None:
    """Validate a resolved configuration.

    Must be called after ``resolve_body`` so that a body read from a
    file is taken into account.

    Args:
        config: The configuration to validate.

    Raises:
        InvalidInputError: If the URL is empty, if the verb is not
            allowed, if a POST request has no body, or if a non-POST
            request has a body.

    Example:
        ```pycon
        >>> from mync.core.config import HttpConfig
        >>> from mync.core.validation import validate_config
        >>> validate_config(HttpConfig(url="http://localhost"))
        >>> validate_config(HttpConfig(url="http://localhost", verb="PUT"))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        mync.exceptions.InvalidInputError: invalid HTTP method

        ```
    """
    if not config.url:
        raise InvalidInputError(ErrorKind.NO_SERVER_SPECIFIED)
    if config.verb not in ALLOWED_VERBS:
        raise InvalidInputError(ErrorKind.INVALID_VERB)
    if config.is_post and not config.has_body:
        raise InvalidInputError(ErrorKind.EMPTY_POST_BODY)
    if not config.is_post and config.has_body:
        raise InvalidInputError(ErrorKind.UNEXPECTED_BODY)
