r"""mync - A small command line HTTP client.

This package sends exactly one HTTP request per invocation. The request
is described by an ``HttpConfig`` which is validated before anything is
sent: only GET, POST and HEAD are allowed, POST requires a body and other
methods must not have one.

Example:
    ```pycon
    >>> from mync import HttpConfig, handle_http
    >>> config = HttpConfig(url="https://example.com", headers=("Accept=text/html",))
    >>> body = handle_http(config)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ErrorCategory",
    "ErrorKind",
    "FileAccessError",
    "HttpConfig",
    "HttpRequestError",
    "InvalidInputError",
    "MyncError",
    "RedirectPolicy",
    "__version__",
    "build_auth",
    "build_request",
    "execute",
    "handle_http",
    "validate_config",
]

from importlib.metadata import PackageNotFoundError, version

from mync.core import HttpConfig, validate_config
from mync.exceptions import (
    ErrorCategory,
    ErrorKind,
    FileAccessError,
    HttpRequestError,
    InvalidInputError,
    MyncError,
)
from mync.executor import execute
from mync.handler import handle_http
from mync.redirect import RedirectPolicy
from mync.request import build_auth, build_request

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
