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

"""Parse settings applied on top of any segment parser."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from vercmp.segments import Segment, SegmentKind

_TEXT_KINDS = frozenset({SegmentKind.TEXT, SegmentKind.EXTENDED_TEXT})


@dataclass(frozen=True)
class Manifest:
    """Settings that shape the parsed segment sequence.

    Attributes:
        max_depth: Keep at most this many segments. None (or 0) means no
            limit. With max_depth=2, "1.2.3" and "1.2.4" compare equal.
            Leading Epoch segments do not count toward the depth.
        ignore_text: Drop Text and ExtendedText segments, so "1.2-beta"
            compares like "1.2".

    """

    max_depth: int | None = None
    ignore_text: bool = False

    @property
    def has_max_depth(self) -> bool:
        return self.max_depth is not None and self.max_depth > 0

    def apply(self, segments: Iterable[Segment]) -> tuple[Segment, ...]:
        """Filter text segments (if configured), then truncate to max_depth."""
        if self.ignore_text:
            segments = [s for s in segments if s.kind not in _TEXT_KINDS]
        out = tuple(segments)
        if self.has_max_depth:
            epochs = 0
            while epochs < len(out) and out[epochs].kind is SegmentKind.EPOCH:
                epochs += 1
            out = out[: epochs + self.max_depth]
        return out
