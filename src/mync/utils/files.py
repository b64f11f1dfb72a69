r"""File helpers for the request body and the response output."""

from __future__ import annotations

__all__ = ["read_body_file", "write_output_file"]

import logging
from pathlib import Path

from mync.exceptions import ErrorKind, FileAccessError

logger: logging.Logger = logging.getLogger(__name__)


def read_body_file(path: str) -> str:
    """Read the whole content of a request body file.

    Args:
        path: The path of the file, decoded as UTF-8.

    Returns:
        The file content.

    Raises:
        FileAccessError: If the file cannot be read or decoded.
    """
    try:
        data = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(
            ErrorKind.BODY_FILE_READ,
            path=path,
            message=f"cannot read body file {path}: {exc}",
            cause=exc,
        ) from exc
    logger.debug(f"Read {len(data)} characters from body file {path}")
    return data


def write_output_file(path: str, data: bytes) -> None:
    """Write the response body to a file.

    The file is created or truncated. If the write fails after the file
    was opened, the partially written file is removed. A file that
    cannot be opened is left untouched.

    Args:
        path: The path of the output file.
        data: The exact bytes to write.

    Raises:
        FileAccessError: If the file cannot be written.
    """
    output = Path(path)
    try:
        f = output.open("wb")
    except OSError as exc:
        raise _output_error(path, exc) from exc
    try:
        with f:
            f.write(data)
    except OSError as exc:
        output.unlink(missing_ok=True)
        raise _output_error(path, exc) from exc
    logger.debug(f"Wrote {len(data)} bytes to {path}")


def _output_error(path: str, exc: OSError) -> FileAccessError:
    return FileAccessError(
        ErrorKind.OUTPUT_WRITE,
        path=path,
        message=f"cannot write output file {path}: {exc}",
        cause=exc,
    )
