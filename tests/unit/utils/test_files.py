from __future__ import annotations

import pathlib
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock, patch

import pytest

from mync.exceptions import ErrorKind, FileAccessError
from mync.utils import read_body_file, write_output_file

if TYPE_CHECKING:
    from pathlib import Path

####################################
#     Tests for read_body_file     #
####################################


def test_read_body_file(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"id":1}', encoding="utf-8")
    assert read_body_file(str(path)) == '{"id":1}'


def test_read_body_file_missing(tmp_path: Path) -> None:
    path = tmp_path / "missing.json"
    with pytest.raises(FileAccessError, match=r"cannot read body file") as exc_info:
        read_body_file(str(path))
    assert exc_info.value.kind is ErrorKind.BODY_FILE_READ
    assert exc_info.value.path == str(path)
    assert isinstance(exc_info.value.cause, OSError)


def test_read_body_file_directory(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError):
        read_body_file(str(tmp_path))


#######################################
#     Tests for write_output_file     #
#######################################


def test_write_output_file(tmp_path: Path) -> None:
    path = tmp_path / "file_path.out"
    write_output_file(str(path), b"this is a response")
    assert path.read_bytes() == b"this is a response"


def test_write_output_file_truncates(tmp_path: Path) -> None:
    path = tmp_path / "file_path.out"
    path.write_bytes(b"a much longer previous content")
    write_output_file(str(path), b"short")
    assert path.read_bytes() == b"short"


def test_write_output_file_missing_directory(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "file_path.out"
    with pytest.raises(FileAccessError, match=r"cannot write output file") as exc_info:
        write_output_file(str(path), b"data")
    assert exc_info.value.kind is ErrorKind.OUTPUT_WRITE
    assert not path.exists()


def test_write_output_file_directory(tmp_path: Path) -> None:
    with pytest.raises(FileAccessError, match=r"cannot write output file") as exc_info:
        write_output_file(str(tmp_path), b"data")
    assert exc_info.value.kind is ErrorKind.OUTPUT_WRITE
    assert isinstance(exc_info.value.cause, OSError)
    assert tmp_path.is_dir()


def test_write_output_file_open_denied_keeps_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "precious.txt"
    path.write_bytes(b"user data")
    with (
        patch.object(
            pathlib.Path, "open", side_effect=PermissionError(13, "Permission denied")
        ),
        pytest.raises(FileAccessError, match=r"Permission denied") as exc_info,
    ):
        write_output_file(str(path), b"data")
    assert exc_info.value.kind is ErrorKind.OUTPUT_WRITE
    assert path.read_bytes() == b"user data"


def test_write_output_file_removes_partial_file(tmp_path: Path) -> None:
    path = tmp_path / "file_path.out"
    real_open = pathlib.Path.open

    def failing_open(self: pathlib.Path, *args: Any, **kwargs: Any) -> MagicMock:
        # Create the file, then fail on write
        real_open(self, *args, **kwargs).close()
        f = MagicMock()
        f.write.side_effect = OSError("No space left on device")
        return f

    with (
        patch.object(pathlib.Path, "open", autospec=True, side_effect=failing_open),
        pytest.raises(FileAccessError, match=r"No space left on device"),
    ):
        write_output_file(str(path), b"data")
    assert not path.exists()
