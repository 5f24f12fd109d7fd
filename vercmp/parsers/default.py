# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Default segment parser.

Splits on any run of non-alphanumeric characters, so ".", "-", "_" and
whitespace are interchangeable separators:

    "1.2.3-dev"    -> [Integer(1), Integer(2), Integer(3), Text("dev")]
    " .   -32 . 1" -> [Integer(32), Integer(1)]
    ""             -> []
    "alpha"        -> None (no digits anywhere)
"""

from __future__ import annotations

import re

from vercmp.segments import Integer, Segment, Text

from .base import register_parser

# Anything that is not a letter or digit (\W is non-word; "_" is a word char)
_SEPARATORS = re.compile(r"[\W_]+")


def split_tokens(version: str) -> list[str]:
    """Split a version string into its non-empty alphanumeric tokens."""
    return [t for t in _SEPARATORS.split(version) if t]


def is_number(token: str) -> bool:
    """True if every character of the token is an ASCII digit."""
    return token.isascii() and token.isdigit()


def default_parser(version: str) -> list[Segment] | None:
    """Parse a version string into Integer and Text segments.

    Returns None when the string has tokens but none of them is numeric.
    """
    segments: list[Segment] = []
    has_number = False

    for token in split_tokens(version):
        if is_number(token):
            segments.append(Integer(int(token)))
            has_number = True
        else:
            segments.append(Text(token))

    if segments and not has_number:
        return None
    return segments


register_parser("default", default_parser)
