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

"""Version segments and their ordering.

A parsed version is a sequence of segments, the atomic comparable pieces of
a version string. This module defines the segment types and the pairwise
comparator used by `Version.compare`. It does no string splitting itself;
that is the job of the parsers in `vercmp.parsers`.

Segment types, highest priority first:

    Epoch(1)                   PEP 440 epoch marker ("1!2.0")
    Integer(3)                 run of ASCII digits
    Text("alpha")              any other token, compared lexicographically
    ExtendedText(3, "dev", 1)  digits/letters/digits token ("3dev1")
    EMPTY                      padding sentinel, never produced by parsing

When two segments of different types meet, the higher priority type wins
regardless of value, so numbers always outrank textual qualifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import re
from typing import ClassVar, Union

__all__ = [
    "SegmentKind",
    "Epoch",
    "Integer",
    "Text",
    "ExtendedText",
    "Empty",
    "EMPTY",
    "Segment",
    "compare_segments",
]


class SegmentKind(IntEnum):
    """Segment type tag; a lower value outranks a higher one."""

    EPOCH = 0
    INTEGER = 1
    TEXT = 2
    EXTENDED_TEXT = 3
    EMPTY = 4


# ----------------------------
# Segment types
# ----------------------------


@dataclass(frozen=True)
class Epoch:
    """Explicit version-scheme generation marker."""

    value: int
    kind: ClassVar[SegmentKind] = SegmentKind.EPOCH

    def empty(self) -> Epoch:
        return Epoch(0)

    def __str__(self) -> str:
        return f"{self.value}!"


@dataclass(frozen=True)
class Integer:
    """Numeric run of a version string, parsed in base 10."""

    value: int
    kind: ClassVar[SegmentKind] = SegmentKind.INTEGER

    def empty(self) -> Integer:
        return Integer(0)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    """Non-numeric run, compared lexicographically."""

    value: str
    kind: ClassVar[SegmentKind] = SegmentKind.TEXT

    def empty(self) -> Text:
        return Text("")

    def __str__(self) -> str:
        return self.value


_EXTENDED_RE = re.compile(r"([0-9]*)([A-Za-z]*)([0-9]*)")


@dataclass(frozen=True)
class ExtendedText:
    """Pre-release/dev/post qualifier with internal structure.

    A token like "3dev1" reads as pre=3, core="dev", post=1. Missing numbers
    are 0, so "dev" and "0dev" are the same segment.

    Ordering compares `pre`, then `core`, then `post`. A core containing
    "dev" sorts below one that does not; failing that, a core containing
    "post" sorts above one that does not; failing that, an empty core (a
    plain release) sorts above any other core, so "rc" < "" < "post".
    Otherwise cores compare as text.
    """

    pre: int
    core: str
    post: int
    kind: ClassVar[SegmentKind] = SegmentKind.EXTENDED_TEXT

    @classmethod
    def parse(cls, token: str) -> ExtendedText | None:
        """Read a digits/letters/digits token.

        Returns:
            The segment, or None if the token has any other shape
            (e.g. "a1b2" or "1.0").

        Example:
            >>> ExtendedText.parse("3dev1")
            ExtendedText(pre=3, core='dev', post=1)
        """
        m = _EXTENDED_RE.fullmatch(token)
        if not m:
            return None
        pre, core, post = m.groups()
        return cls(int(pre) if pre else 0, core, int(post) if post else 0)

    def empty(self) -> ExtendedText:
        return ExtendedText(0, "", 0)

    def __str__(self) -> str:
        pre = str(self.pre) if self.pre else ""
        post = str(self.post) if self.post else ""
        return f"{pre}{self.core}{post}"


@dataclass(frozen=True)
class Empty:
    """Padding sentinel with no textual representation."""

    kind: ClassVar[SegmentKind] = SegmentKind.EMPTY

    def empty(self) -> Empty:
        return self

    def __str__(self) -> str:
        return ""


EMPTY = Empty()

Segment = Union[Epoch, Integer, Text, ExtendedText, Empty]


# ----------------------------
# Ordering
# ----------------------------


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_core(a: str, b: str) -> int:
    """Keyword-aware comparison of two ExtendedText cores."""
    a_dev, b_dev = "dev" in a, "dev" in b
    if a_dev != b_dev:
        return -1 if a_dev else 1
    a_post, b_post = "post" in a, "post" in b
    if a_post != b_post:
        return 1 if a_post else -1
    if not a or not b:
        # Release outranks any pre-release marker
        return _cmp(not a, not b)
    return _cmp(a, b)


def _compare_extended(a: ExtendedText, b: ExtendedText) -> int:
    return _cmp(a.pre, b.pre) or _compare_core(a.core, b.core) or _cmp(a.post, b.post)


def compare_segments(a: Segment, b: Segment) -> int:
    """Order two segments of any type.

    Returns -1 if a < b, 0 if equal, 1 if a > b.

    Segments of the same type compare by value. Segments of different types
    compare by type priority alone: Epoch > Integer > Text > ExtendedText >
    Empty.

    Example:
        >>> compare_segments(Integer(2), Integer(10))
        -1
        >>> compare_segments(Integer(0), Text("zzz"))
        1
    """
    if a.kind != b.kind:
        # Lower kind value means higher priority
        return 1 if a.kind < b.kind else -1
    if a.kind is SegmentKind.EXTENDED_TEXT:
        return _compare_extended(a, b)
    if a.kind is SegmentKind.EMPTY:
        return 0
    return _cmp(a.value, b.value)
