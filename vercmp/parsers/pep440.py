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

"""PEP 440-style segment parser.

Extends the default split/classify rules with the markers Python packaging
uses, so pre-releases, dev and post releases order sensibly:

    "1.2.3dev1"   -> [Epoch(0), Integer(1), Integer(2), Integer(3),
                      ExtendedText(0, "dev", 1)]
    "1.2.3.post1" -> [Epoch(0), Integer(1), Integer(2), Integer(3),
                      ExtendedText(0, "post", 1)]
    "2!1.0"       -> [Epoch(2), Integer(1), Integer(0)]

Behavior:
- Input is lower-cased (PEP 440 is case-insensitive) and a leading "v" is
  dropped ("v1.0" == "1.0").
- Every result starts with an Epoch segment; "0!" is implied, so
  "0!1.0" == "1.0".
- Tokens are classified as Integer (all ASCII digits), ExtendedText
  (digits/letters/digits) or Text (anything else, e.g. "a1b2").
- A marker glued to a release number is split from it: "3rc1" becomes
  Integer(3) and ExtendedText(0, "rc", 1), so the release numbers of two
  versions are always compared as integers.

With these segments "1.2.2" < "1.2.3dev1" < "1.2.3rc1" < "1.2.3" <
"1.2.3.post1" < "1.2.4".
"""

from __future__ import annotations

import re

from vercmp.segments import Epoch, ExtendedText, Integer, Segment, Text

from .base import register_parser
from .default import is_number, split_tokens

_EPOCH_RE = re.compile(r"\s*([0-9]+)!")
_V_PREFIX_RE = re.compile(r"\s*v(?=\d)")


def pep440_parser(version: str) -> list[Segment] | None:
    """Parse a version string into Epoch, Integer, ExtendedText and Text segments.

    Returns None when the string has tokens but none of them carries a
    number.
    """
    s = version.lower()
    m = _V_PREFIX_RE.match(s)
    if m:
        s = s[m.end() :]

    epoch = 0
    m = _EPOCH_RE.match(s)
    if m:
        epoch = int(m.group(1))
        s = s[m.end() :]

    segments: list[Segment] = []
    has_number = m is not None

    for token in split_tokens(s):
        if is_number(token):
            segments.append(Integer(int(token)))
            has_number = True
            continue
        extended = ExtendedText.parse(token)
        if extended is None:
            segments.append(Text(token))
            continue
        if token[0].isdigit():
            # "3rc1" is release number 3 followed by the rc1 marker
            segments.append(Integer(extended.pre))
            extended = ExtendedText(0, extended.core, extended.post)
        segments.append(extended)
        if any(c.isdigit() for c in token):
            has_number = True

    if segments and not has_number:
        return None
    if not segments and m is None:
        return []
    return [Epoch(epoch)] + segments


register_parser("pep440", pep440_parser)
