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

"""Segment parsers for vercmp.

This package provides a pluggable strategy for turning a raw version string
into segments. The comparator works on segments only, so swapping the parser
changes which strings are accepted and how tokens are classified without
touching the ordering rules.

Available Parsers:
    default : default_parser
        Split on non-alphanumerics; digits become Integer, the rest Text.
    pep440 : pep440_parser
        Adds a leading Epoch and ExtendedText segments so dev, pre and
        post releases order like Python packaging versions.

Example:
    Look up a parser by name:

        from vercmp.parsers import get_parser

        parser = get_parser("pep440")
        segments = parser("1.0.post1")

Note:
    Parsers self-register when their module is imported. This package
    imports both built-in parsers, so they are always available.
"""

from .base import SegmentParser, available_parsers, get_parser, register_parser

# Import parser modules to trigger registration
from .default import default_parser
from .pep440 import pep440_parser

__all__ = [
    "SegmentParser",
    "available_parsers",
    "get_parser",
    "register_parser",
    "default_parser",
    "pep440_parser",
]
