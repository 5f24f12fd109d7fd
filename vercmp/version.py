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

"""Parsed version representation and whole-version comparison.

A `Version` keeps the original string and its segment sequence. Two
versions compare by walking both sequences pairwise. When one side runs out,
each remaining segment on the other side is compared against the empty value
of its own type (0 for numbers, "" for text), so trailing zeros are
insignificant while any trailing text or non-zero number decides:

    "1.0.0"   == "1"
    "1.0.1"   >  "1"
    "1.0-rc"  >  "1.0"          (default parser: Text("rc") > Text(""))
    "1.0.dev" <  "1.0"          (pep440 parser: "dev" sorts below release)

Equality, ordering and hashing are all defined through `compare`, not
through structural equality of the segments.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Union

from vercmp.cmp import Cmp, satisfies
from vercmp.config.manifest import Manifest
from vercmp.exceptions import ParseError
from vercmp.logging import Logger, get_global_logger
from vercmp.parsers import SegmentParser, default_parser, get_parser
from vercmp.segments import Segment, compare_segments

ParserSpec = Union[str, SegmentParser, None]


@dataclass(frozen=True, eq=False)
class Version:
    """An immutable parsed version.

    Attributes:
        version: The original version string.
        segments: The parsed segments, in order.

    Example:
        >>> a = parse_version("1.2")
        >>> b = parse_version("1.5.1")
        >>> a.compare(b)
        <Cmp.LT: '<'>
        >>> a < b, a == parse_version("1.2.0")
        (True, True)
    """

    version: str
    segments: tuple[Segment, ...]

    def segment(self, index: int) -> Segment:
        """Get the segment at `index`.

        Raises:
            IndexError: If the index is out of range.
        """
        return self.segments[index]

    def compare(self, other: Version) -> Cmp:
        """Compare to `other`, returning Cmp.LT, Cmp.EQ or Cmp.GT."""
        for mine, theirs in zip_longest(self.segments, other.segments):
            if mine is None:
                mine = theirs.empty()
            elif theirs is None:
                theirs = mine.empty()
            result = compare_segments(mine, theirs)
            if result:
                return Cmp.from_ord(result)
        return Cmp.EQ

    def compare_to(self, other: Version, operator: Cmp | str) -> bool:
        """Test `self <operator> other`.

        Args:
            other: The version to compare against.
            operator: Any Cmp member, or its sign ("<=", "!=", ...).
        """
        if isinstance(operator, str):
            operator = Cmp.from_sign(operator)
        return satisfies(self.compare(other), operator)

    def _significant(self) -> tuple[Segment, ...]:
        # Segments equal to their own empty value at the tail never change
        # a comparison result
        segments = self.segments
        end = len(segments)
        while end and compare_segments(segments[end - 1], segments[end - 1].empty()) == 0:
            end -= 1
        return segments[:end]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Cmp.EQ

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Cmp.EQ

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Cmp.LT

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Cmp.GT

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is Cmp.GT

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) is not Cmp.LT

    def __hash__(self) -> int:
        return hash(self._significant())

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.version


def _resolve_parser(parser: ParserSpec) -> SegmentParser:
    if parser is None:
        return default_parser
    if isinstance(parser, str):
        return get_parser(parser)
    return parser


def parse_version(
    version: str,
    parser: ParserSpec = None,
    *,
    manifest: Manifest | None = None,
    logger: Logger | None = None,
) -> Version:
    """Parse a version string into a Version.

    Args:
        version: The raw version string. Empty strings are valid and parse
            to zero segments.
        parser: A segment parser callable, the name of a registered parser
            ("default", "pep440"), or None for the default parser.
        manifest: Optional settings to drop text segments or limit depth.
        logger: Logger for debug output. Defaults to the global logger.

    Returns:
        The parsed Version.

    Raises:
        ParseError: If the parser rejects the string.
        ConfigError: If `parser` names an unregistered parser.

    Examples:
        >>> parse_version("1.2.3").segments
        (Integer(value=1), Integer(value=2), Integer(value=3))

        >>> parse_version("1.0.dev2", parser="pep440").segments[-1]
        ExtendedText(pre=0, core='dev', post=2)
    """
    if logger is None:
        logger = get_global_logger()

    segments = _resolve_parser(parser)(version)
    if segments is None:
        logger.debug("PARSE", f"{version!r} -> rejected")
        raise ParseError(version)

    if manifest is not None:
        segments = manifest.apply(segments)
    result = Version(version, tuple(segments))
    logger.debug("PARSE", f"{version!r} -> {list(result.segments)}")
    return result
