r"""Redirect policy of the ``http`` command.

The ``-disable-redirect`` flag does not forbid redirects altogether: it
limits them to a single hop. The first redirect is followed and a second
redirect aborts the request with a ``TOO_MANY_REDIRECTS`` error. Without
the flag, redirects are followed up to the ``httpx`` default limit.
"""

from __future__ import annotations

__all__ = ["RedirectPolicy", "log_redirect"]

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from mync.core.config import REDIRECT_HOP_LIMIT

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedirectPolicy:
    """Decide how many redirects are followed before aborting.

    Args:
        max_redirects: The maximum number of redirect hops. ``None``
            delegates to the transport default.

    Example:
        ```pycon
        >>> from mync.redirect import RedirectPolicy
        >>> policy = RedirectPolicy.from_config(disable_redirect=True)
        >>> policy.allows(1), policy.allows(2)
        (True, False)
        >>> RedirectPolicy.from_config(disable_redirect=False).allows(5)
        True

        ```
    """

    max_redirects: int | None = None

    @classmethod
    def from_config(cls, disable_redirect: bool) -> RedirectPolicy:
        r"""Create the policy matching the ``-disable-redirect`` flag."""
        if disable_redirect:
            return cls(max_redirects=REDIRECT_HOP_LIMIT)
        return cls()

    def allows(self, hops: int) -> bool:
        """Indicate if ``hops`` redirects may be followed.

        Args:
            hops: The number of redirects followed so far, including the
                one being considered.

        Returns:
            ``True`` if the redirect may be followed.
        """
        return self.max_redirects is None or hops <= self.max_redirects

    def client_options(self) -> dict[str, Any]:
        """Return the ``httpx.Client`` keyword arguments enforcing the
        policy.

        The client follows redirects and runs the hook returned by
        ``redirect_hook`` on every response. Without a limit, the
        ``httpx`` default ``max_redirects`` still applies.

        Example:
            ```pycon
            >>> from mync.redirect import RedirectPolicy
            >>> options = RedirectPolicy(max_redirects=1).client_options()
            >>> options["follow_redirects"], len(options["event_hooks"]["response"])
            (True, 1)

            ```
        """
        return {
            "follow_redirects": True,
            "event_hooks": {"response": [self.redirect_hook()]},
        }

    def redirect_hook(self) -> Callable[[httpx.Response], None]:
        """Return a response hook applying ``allows`` to each redirect.

        The hook counts the redirect responses of one request, so a new
        hook is needed for every request. A redirect that is not allowed
        raises ``httpx.TooManyRedirects`` before it is followed.

        Returns:
            The response hook.
        """
        hops = 0

        def check_redirect(response: httpx.Response) -> None:
            nonlocal hops
            if not response.has_redirect_location:
                return
            hops += 1
            request = response.request
            if not self.allows(hops):
                raise httpx.TooManyRedirects(
                    self.describe_abort(request.method, str(request.url)), request=request
                )
            log_redirect(response)

        return check_redirect

    def describe_abort(self, method: str, url: str) -> str:
        r"""Return the message reported when the limit is exceeded."""
        if self.max_redirects is None:
            return f"{method} request to {url} exceeded the maximum allowed redirects"
        plural = "" if self.max_redirects == 1 else "s"
        return f"{method} request to {url} stopped after {self.max_redirects} redirect{plural}"


def log_redirect(response: httpx.Response) -> None:
    r"""Log a redirect that is about to be followed."""
    if response.has_redirect_location:
        logger.debug(
            f"{response.request.method} request to {response.request.url} redirected "
            f"({response.status_code}) to {response.headers['Location']}"
        )
