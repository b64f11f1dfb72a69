r"""Command line interface of ``mync``.

Options of the ``http`` command accept the historical single-dash
spelling (``-verb POST``) as well as the double-dash one
(``--verb POST``).
"""

from __future__ import annotations

__all__ = ["cli", "http", "main"]

import logging

import click

from mync.core.config import ALLOWED_VERBS, DEFAULT_TIMEOUT, DEFAULT_VERB, HttpConfig
from mync.exceptions import ErrorCategory, ErrorKind, InvalidInputError, MyncError
from mync.handler import handle_http

logger: logging.Logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Log request details to stderr.")
@click.version_option(package_name="mync")
def cli(verbose: bool) -> None:
    """mync: a small HTTP client."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("http", context_settings=CONTEXT_SETTINGS)
@click.argument("server", nargs=-1)
@click.option(
    "-verb", "--verb", default=DEFAULT_VERB, show_default=True,
    help=f"HTTP method ({', '.join(ALLOWED_VERBS)}).",
)
@click.option("-body", "--body", default="", help="JSON data for HTTP POST request.")
@click.option(
    "-body-file", "--body-file", default="",
    help="File containing JSON data for HTTP POST request.",
)
@click.option("-output", "--output", default="", help="File path to write the response into.")
@click.option(
    "-disable-redirect", "--disable-redirect", is_flag=True,
    help="Follow at most one redirect, fail on the next one.",
)
@click.option(
    "-basicauth", "--basicauth", default="",
    help="Add basic auth (username=password) credentials to the outgoing request.",
)
@click.option(
    "-header", "--header", multiple=True,
    help="Add one or more headers to the outgoing request (key=value).",
)
@click.option(
    "-timeout", "--timeout", type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT, show_default=True, help="Request timeout in seconds.",
)
@click.pass_context
def http(
    ctx: click.Context,
    server: tuple[str, ...],
    verb: str,
    body: str,
    body_file: str,
    output: str,
    disable_redirect: bool,
    basicauth: str,
    header: tuple[str, ...],
    timeout: float,
) -> None:
    """A HTTP client.

    Send one request to SERVER and print the response body, or save it
    with -output.
    """
    try:
        if len(server) != 1:
            raise InvalidInputError(ErrorKind.NO_SERVER_SPECIFIED)
        config = HttpConfig(
            url=server[0],
            verb=verb,
            post_body=body,
            body_file=body_file,
            headers=header,
            basic_auth=basicauth,
            disable_redirect=disable_redirect,
            output_file=output,
            timeout=timeout,
        )
        handle_http(config)
    except MyncError as exc:
        logger.debug(f"http command failed with {exc.kind.name}")
        if exc.category is ErrorCategory.INPUT:
            raise click.UsageError(exc.message, ctx=ctx) from exc
        raise click.ClickException(exc.message) from exc


def main() -> None:
    cli(prog_name="mync")


if __name__ == "__main__":
    main()
