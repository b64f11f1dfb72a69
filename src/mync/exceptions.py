r"""Define the error kinds and exceptions raised by ``mync``.

Every failure is described by a member of ``ErrorKind``. Each kind
belongs to an ``ErrorCategory`` which the command line layer uses to
decide how the error is reported: input errors are shown together with
the usage text, transport errors are shown on their own.
"""

from __future__ import annotations

__all__ = [
    "ErrorCategory",
    "ErrorKind",
    "FileAccessError",
    "HttpRequestError",
    "InvalidInputError",
    "MyncError",
]

from enum import Enum


class ErrorCategory(Enum):
    r"""Define the broad classes of errors."""

    INPUT = "input"
    TRANSPORT = "transport"


class ErrorKind(Enum):
    r"""Define the closed set of error kinds.

    Each member holds its default message and its category.

    Example:
        ```pycon
        >>> from mync.exceptions import ErrorCategory, ErrorKind
        >>> ErrorKind.INVALID_VERB.message
        'invalid HTTP method'
        >>> ErrorKind.INVALID_VERB.category is ErrorCategory.INPUT
        True

        ```
    """

    NO_SERVER_SPECIFIED = ("you have to specify the remote server", ErrorCategory.INPUT)
    INVALID_URL = ("invalid remote server URL", ErrorCategory.INPUT)
    INVALID_VERB = ("invalid HTTP method", ErrorCategory.INPUT)
    EMPTY_POST_BODY = (
        "http POST request must specify a non-empty JSON body",
        ErrorCategory.INPUT,
    )
    UNEXPECTED_BODY = ("invalid HTTP command", ErrorCategory.INPUT)
    CONFLICTING_BODY_SOURCES = ("cannot specify both body and body-file", ErrorCategory.INPUT)
    MALFORMED_HEADER = ("header must be specified as key=value", ErrorCategory.INPUT)
    MALFORMED_BASIC_AUTH = (
        "basic auth must be specified as username=password",
        ErrorCategory.INPUT,
    )
    TOO_MANY_REDIRECTS = ("redirect limit exceeded", ErrorCategory.TRANSPORT)
    TIMEOUT = ("request timed out", ErrorCategory.TRANSPORT)
    REQUEST_FAILED = ("request failed", ErrorCategory.TRANSPORT)
    BODY_FILE_READ = ("cannot read body file", ErrorCategory.TRANSPORT)
    OUTPUT_WRITE = ("cannot write output file", ErrorCategory.TRANSPORT)

    def __init__(self, message: str, category: ErrorCategory) -> None:
        self.message = message
        self.category = category


class MyncError(Exception):
    r"""Base exception of all ``mync`` errors.

    Args:
        kind: The kind of error.
        message: Optional message. Defaults to the message of ``kind``.
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.kind = kind
        self.message = message or kind.message
        self.cause = cause
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        r"""The category of the error kind."""
        return self.kind.category


class InvalidInputError(MyncError):
    r"""Raised for user-correctable configuration errors.

    Example:
        ```pycon
        >>> from mync.exceptions import ErrorKind, InvalidInputError
        >>> str(InvalidInputError(ErrorKind.INVALID_VERB))
        'invalid HTTP method'

        ```
    """


class HttpRequestError(MyncError):
    r"""Raised when the HTTP request cannot be completed.

    Args:
        kind: The kind of error.
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: Optional message. Defaults to the message of ``kind``.
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        kind: ErrorKind,
        *,
        method: str,
        url: str,
        message: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(kind, message=message, cause=cause)
        self.method = method
        self.url = url


class FileAccessError(MyncError):
    r"""Raised when the body file or the output file cannot be
    accessed."""

    def __init__(
        self,
        kind: ErrorKind,
        *,
        path: str,
        message: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(kind, message=message, cause=cause)
        self.path = path
