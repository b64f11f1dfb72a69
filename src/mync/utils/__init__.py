r"""Utility functions for parsing command line values and accessing
files."""

from __future__ import annotations

__all__ = ["parse_key_value", "read_body_file", "write_output_file"]

from mync.utils.files import read_body_file, write_output_file
from mync.utils.parsing import parse_key_value
