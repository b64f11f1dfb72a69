r"""Build the outbound ``httpx.Request`` from a validated
configuration.

No network I/O happens in this module.
"""

from __future__ import annotations

__all__ = ["build_auth", "build_headers", "build_request"]

import logging
from typing import TYPE_CHECKING

import httpx

from mync.core.config import JSON_CONTENT_TYPE
from mync.exceptions import ErrorKind, InvalidInputError
from mync.utils.parsing import parse_key_value

if TYPE_CHECKING:
    from mync.core.config import HttpConfig

logger: logging.Logger = logging.getLogger(__name__)


def build_headers(config: HttpConfig) -> list[tuple[str, str]]:
    """Build the ordered list of request headers.

    POST requests implicitly get ``Content-Type: application/json``
    unless the user supplies a ``Content-Type`` header. User headers
    keep their order and repeated keys are all kept.

    Args:
        config: The validated configuration.

    Returns:
        The ``(key, value)`` header pairs.

    Raises:
        InvalidInputError: If a header is not ``key=value``.

    Example:
        ```pycon
        >>> from mync.core.config import HttpConfig
        >>> from mync.request import build_headers
        >>> build_headers(HttpConfig(url="http://localhost", headers=("X-Id=1", "X-Id=2")))
        [('X-Id', '1'), ('X-Id', '2')]

        ```
    """
    headers = [parse_key_value(raw, ErrorKind.MALFORMED_HEADER) for raw in config.headers]
    if config.is_post and not any(key.lower() == "content-type" for key, _ in headers):
        headers.insert(0, ("Content-Type", JSON_CONTENT_TYPE))
    return headers


def build_request(config: HttpConfig) -> httpx.Request:
    """Build the request described by a validated configuration.

    Basic auth credentials are not part of the request; see
    ``build_auth``.

    Args:
        config: The configuration, already checked by
            ``validate_config``.

    Returns:
        The request, with its body attached only for POST.

    Raises:
        InvalidInputError: If a header or the URL is malformed.

    Example:
        ```pycon
        >>> from mync.core.config import HttpConfig
        >>> from mync.request import build_request
        >>> request = build_request(
        ...     HttpConfig(url="http://localhost/upload", verb="POST", post_body='{"id":1}')
        ... )
        >>> request.method, request.headers["Content-Type"], request.content
        ('POST', 'application/json', b'{"id":1}')

        ```
    """
    content = config.post_body.encode("utf-8") if config.is_post else None
    headers = build_headers(config)
    try:
        request = httpx.Request(config.verb, config.url, headers=headers, content=content)
    except httpx.InvalidURL as exc:
        raise InvalidInputError(
            ErrorKind.INVALID_URL, message=f"invalid remote server URL: {exc}", cause=exc
        ) from exc
    logger.debug(f"Built {request.method} request to {request.url}")
    return request


def build_auth(config: HttpConfig) -> httpx.BasicAuth | None:
    """Build the Basic auth sent with the request.

    The ``username=password`` value is split on the first ``=``, so the
    password may contain ``=``.

    Args:
        config: The validated configuration.

    Returns:
        The credentials, or ``None`` if basic auth is not configured.

    Raises:
        InvalidInputError: If the value is not ``username=password``.

    Example:
        ```pycon
        >>> from mync.core.config import HttpConfig
        >>> from mync.request import build_auth
        >>> build_auth(HttpConfig(url="http://localhost")) is None
        True
        >>> type(build_auth(HttpConfig(url="http://localhost", basic_auth="user=pa=ss"))).__name__
        'BasicAuth'

        ```
    """
    if not config.basic_auth:
        return None
    username, password = parse_key_value(config.basic_auth, ErrorKind.MALFORMED_BASIC_AUTH)
    return httpx.BasicAuth(username, password)
