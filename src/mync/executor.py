r"""Send the built request and route the response body to its output
sink.

The sink is either a text stream (standard output by default) or a file.
Exactly one of them receives output for a given request: the body itself
when writing to the stream, or a confirmation line naming the file.
"""

from __future__ import annotations

__all__ = ["execute", "send_request"]

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import httpx

from mync.core.config import DEFAULT_TIMEOUT
from mync.core.validation import validate_timeout
from mync.exceptions import ErrorKind, HttpRequestError
from mync.utils.files import write_output_file

if TYPE_CHECKING:
    from mync.redirect import RedirectPolicy

logger: logging.Logger = logging.getLogger(__name__)


def send_request(
    request: httpx.Request,
    policy: RedirectPolicy,
    *,
    auth: httpx.Auth | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Response:
    """Send a request and read the whole response.

    A new ``httpx.Client`` enforcing the redirect policy is created for
    the request and closed before returning.

    Args:
        request: The request to send.
        policy: The redirect policy to apply.
        auth: Optional authentication, e.g. ``httpx.BasicAuth``, applied
            by the client when sending.
        timeout: Maximum seconds to wait for the server response.
            Must be > 0.
        transport: Optional transport used by the client. If ``None``,
            the default network transport is used.

    Returns:
        The response, with its body already read.

    Raises:
        HttpRequestError: If the redirect limit is exceeded, if the
            request times out, or if any other network error occurs.
        ValueError: If timeout is invalid.
    """
    validate_timeout(timeout)
    method, url = request.method, str(request.url)
    try:
        with httpx.Client(timeout=timeout, transport=transport, **policy.client_options()) as client:
            # Requests built outside the client do not carry its timeout
            request.extensions["timeout"] = client.timeout.as_dict()
            logger.debug(f"Sending {method} request to {url}")
            response = client.send(request, auth=auth)
    except httpx.TooManyRedirects as exc:
        raise HttpRequestError(
            ErrorKind.TOO_MANY_REDIRECTS,
            method=method,
            url=url,
            message=policy.describe_abort(method, url),
            cause=exc,
        ) from exc
    except httpx.TimeoutException as exc:
        raise HttpRequestError(
            ErrorKind.TIMEOUT,
            method=method,
            url=url,
            message=f"{method} request to {url} timed out: {exc}",
            cause=exc,
        ) from exc
    except httpx.RequestError as exc:
        raise HttpRequestError(
            ErrorKind.REQUEST_FAILED,
            method=method,
            url=url,
            message=f"{method} request to {url} failed: {exc}",
            cause=exc,
        ) from exc

    logger.debug(
        f"{method} request to {url} returned status {response.status_code} "
        f"({len(response.content)} bytes, {len(response.history)} redirect(s))"
    )
    if not response.is_success:
        logger.warning(f"{method} request to {url} returned status {response.status_code}")
    return response


def execute(
    request: httpx.Request,
    policy: RedirectPolicy,
    *,
    output_file: str = "",
    stream: TextIO | None = None,
    auth: httpx.Auth | None = None,
    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> bytes:
    """Send a request and report its response body.

    Args:
        request: The request to send.
        policy: The redirect policy to apply.
        auth: Optional authentication, e.g. ``httpx.BasicAuth``, applied
            by the client when sending.
        output_file: If set, the response body is written to this file
            and a confirmation line is written to ``stream``.
        stream: The default output stream. If ``None``, standard output
            is used.
        timeout: Maximum seconds to wait for the server response.
        transport: Optional transport used by the client.

    Returns:
        The raw response body.

    Raises:
        HttpRequestError: If the request fails.
        FileAccessError: If the output file cannot be written.

    Example:
        ```pycon
        >>> import httpx
        >>> from mync.executor import execute
        >>> from mync.redirect import RedirectPolicy
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
        >>> body = execute(
        ...     httpx.Request("GET", "http://localhost/"), RedirectPolicy(), transport=transport
        ... )
        ok
        >>> body
        b'ok'

        ```
    """
    stream = stream if stream is not None else sys.stdout
    response = send_request(
        request, policy, auth=auth, timeout=timeout, transport=transport
    )
    body = response.content
    if output_file:
        write_output_file(output_file, body)
        stream.write(f"Data saved to: {output_file}\n")
    else:
        stream.write(f"{response.text}\n")
    return body
