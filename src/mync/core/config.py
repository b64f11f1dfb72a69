r"""Configuration dataclass and defaults for the ``http`` command.

This module provides configuration constants and the dataclass holding
the resolved parameters of one outbound HTTP request.
"""

from __future__ import annotations

__all__ = [
    "ALLOWED_VERBS",
    "DEFAULT_TIMEOUT",
    "DEFAULT_VERB",
    "JSON_CONTENT_TYPE",
    "POST_VERB",
    "REDIRECT_HOP_LIMIT",
    "HttpConfig",
]

from dataclasses import dataclass

# The only method that carries a request body
POST_VERB = "POST"

# HTTP methods accepted by the client (exact, case-sensitive match)
ALLOWED_VERBS = ("GET", POST_VERB, "HEAD")

DEFAULT_VERB = "GET"

# Default timeout in seconds for the whole request
DEFAULT_TIMEOUT = 10.0

# Number of redirect hops followed when redirects are "disabled"
REDIRECT_HOP_LIMIT = 1

# Content type implicitly sent with POST bodies
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class HttpConfig:
    """Resolved description of one outbound HTTP request.

    Instances are immutable. Derived configs (for example after the
    body file has been read) are created with ``dataclasses.replace``.

    Args:
        url: The target URL.
        verb: The HTTP method. Must be one of ``ALLOWED_VERBS``.
        post_body: The literal request body, only valid for POST.
        body_file: Path of a file holding the request body. Mutually
            exclusive with ``post_body``.
        headers: Raw ``key=value`` header strings, in order.
        basic_auth: Raw ``username=password`` credentials.
        disable_redirect: If ``True``, at most one redirect is followed
            and a second one is an error.
        output_file: If set, the response body is written to this path
            instead of the output stream.
        timeout: Maximum seconds to wait for the server.

    Example:
        ```pycon
        >>> from mync.core.config import HttpConfig
        >>> config = HttpConfig(url="https://example.com")
        >>> config.verb
        'GET'
        >>> config.has_body
        False

        ```
    """

    url: str
    verb: str = DEFAULT_VERB
    post_body: str = ""
    body_file: str = ""
    headers: tuple[str, ...] = ()
    basic_auth: str = ""
    disable_redirect: bool = False
    output_file: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @property
    def has_body(self) -> bool:
        r"""``True`` if a literal body is set."""
        return len(self.post_body) != 0

    @property
    def is_post(self) -> bool:
        r"""``True`` if the method is POST, the only one sending a body."""
        return self.verb == POST_VERB
