r"""Run one ``http`` command invocation from a configuration."""

from __future__ import annotations

__all__ = ["handle_http"]

import logging
from typing import TYPE_CHECKING, TextIO

from mync.core.validation import resolve_body, validate_config, validate_timeout
from mync.executor import execute
from mync.redirect import RedirectPolicy
from mync.request import build_auth, build_request

if TYPE_CHECKING:
    import httpx

    from mync.core.config import HttpConfig

logger: logging.Logger = logging.getLogger(__name__)


def handle_http(
    config: HttpConfig,
    *,
    stream: TextIO | None = None,
    transport: httpx.BaseTransport | None = None,
) -> bytes:
    """Validate a configuration, then send the request it describes.

    The body file is resolved first, then the configuration is
    validated, so no file is written and no request is sent when the
    configuration is invalid.

    Args:
        config: The configuration built from the command line.
        stream: The default output stream. If ``None``, standard output
            is used.
        transport: Optional ``httpx`` transport, e.g.
            ``httpx.MockTransport`` in tests.

    Returns:
        The raw response body.

    Raises:
        InvalidInputError: If the configuration is invalid.
        HttpRequestError: If the request fails.
        FileAccessError: If the body file cannot be read or the output
            file cannot be written.
        ValueError: If the timeout is not positive.

    Example:
        ```pycon
        >>> import httpx
        >>> from mync.core import HttpConfig
        >>> from mync.handler import handle_http
        >>> transport = httpx.MockTransport(
        ...     lambda request: httpx.Response(200, text="this is a response")
        ... )
        >>> body = handle_http(HttpConfig(url="http://localhost/download"), transport=transport)
        this is a response

        ```
    """
    validate_timeout(config.timeout)
    config = resolve_body(config)
    validate_config(config)
    request = build_request(config)
    auth = build_auth(config)
    policy = RedirectPolicy.from_config(config.disable_redirect)
    logger.debug(f"Executing {config.verb} request to {config.url} with {policy}")
    return execute(
        request,
        policy,
        output_file=config.output_file,
        auth=auth,
        stream=stream,
        timeout=config.timeout,
        transport=transport,
    )
