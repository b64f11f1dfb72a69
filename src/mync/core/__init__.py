r"""Core configuration and validation logic of the ``http``
command."""

from __future__ import annotations

__all__ = [
    "ALLOWED_VERBS",
    "DEFAULT_TIMEOUT",
    "DEFAULT_VERB",
    "JSON_CONTENT_TYPE",
    "POST_VERB",
    "REDIRECT_HOP_LIMIT",
    "HttpConfig",
    "resolve_body",
    "validate_config",
    "validate_timeout",
]

from mync.core.config import (
    ALLOWED_VERBS,
    DEFAULT_TIMEOUT,
    DEFAULT_VERB,
    JSON_CONTENT_TYPE,
    POST_VERB,
    REDIRECT_HOP_LIMIT,
    HttpConfig,
)
from mync.core.validation import resolve_body, validate_config, validate_timeout
