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

"""Segment parser protocol and registry for vercmp.

This module defines the foundational components for the parsing system:

- SegmentParser protocol: Interface that every parser satisfies
- Parser registry: Global dict mapping parser names to parser callables
- Registration and lookup functions: register_parser() and get_parser()

A parser is any callable taking the raw version string and returning the
list of segments, or None when the string is not a version at all. Parsers
are plain functions, not classes: the comparator never needs to know which
parser produced a segment sequence.

Built-in parsers:

- default: split on non-alphanumerics into Integer and Text segments
- pep440: adds Epoch and ExtendedText segments for dev/pre/post markers

Example:
    Implementing a custom parser:
        ```python
        from vercmp.parsers.base import register_parser
        from vercmp.segments import Integer

        def dotted_ints(version):
            parts = [p for p in version.split(".") if p]
            if not all(p.isdigit() for p in parts):
                return None
            return [Integer(int(p)) for p in parts]

        register_parser("dotted_ints", dotted_ints)

        # Now usable by name:
        # parse_version("1.2.3", parser="dotted_ints")
        # vercmp compare 1.2 1.3 --parser dotted_ints
        ```

"""

from __future__ import annotations

from typing import Protocol

from vercmp.exceptions import ConfigError
from vercmp.segments import Segment

# -------------------------------
# Parser Protocol
# -------------------------------


class SegmentParser(Protocol):
    """Protocol for segment parsers."""

    def __call__(self, version: str) -> list[Segment] | None:
        """Split a version string into segments.

        Args:
            version: The raw version string, as given by the caller.

        Returns:
            The ordered segments (possibly empty), or None if the string
            does not describe a version.

        """
        ...


# -------------------------------
# Parser Registry
# -------------------------------

_PARSER_REGISTRY: dict[str, SegmentParser] = {}


def register_parser(name: str, parser: SegmentParser) -> None:
    """Register a segment parser by name in the global registry.

    Registering the same name twice overwrites the previous registration
    (allows monkey-patching for tests).

    Args:
        name: Parser name (e.g., "pep440"). This is the value accepted by
            `parse_version(parser=...)`, the config file `parser` key and the
            CLI `--parser` option.
        parser: The parser callable.

    """
    _PARSER_REGISTRY[name] = parser


def get_parser(name: str) -> SegmentParser:
    """Get a registered segment parser by name.

    Args:
        name: Parser name. Case-sensitive.

    Returns:
        The registered parser callable.

    Raises:
        ConfigError: If the parser name is not registered. The error message
            lists the available parsers.

    Example:
        Handle unknown parser:
            ```python
            try:
                parser = get_parser("nonexistent")
            except ConfigError as e:
                print(f"Parser not found: {e}")
            ```

    """
    if name not in _PARSER_REGISTRY:
        available = ", ".join(sorted(_PARSER_REGISTRY))
        raise ConfigError(
            f"Unknown version parser: {name!r}. Available: {available or '(none)'}"
        )
    return _PARSER_REGISTRY[name]


def available_parsers() -> list[str]:
    """Return the registered parser names, sorted."""
    return sorted(_PARSER_REGISTRY)
