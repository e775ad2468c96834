# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envlines -- read .env files into ordered key-value pairs and load them into the environment."""

from envlines.env_file import Pair, parse_line, parse_lines, read_env_file
from envlines.errors import EnvFileError, ErrorKind, LineSyntaxError
from envlines.sdk import file_to_env, file_to_list, get_or, to_env, to_list

__all__ = [
    "__version__",
    "EnvFileError",
    "ErrorKind",
    "LineSyntaxError",
    "Pair",
    "file_to_env",
    "file_to_list",
    "get_or",
    "parse_line",
    "parse_lines",
    "read_env_file",
    "to_env",
    "to_list",
]
__version__ = "0.1.0"
