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

"""String-level comparison helpers.

These functions parse their string arguments and delegate to `Version`.
Every input is parsed before anything is compared: if any input is invalid,
one ParseError naming all invalid inputs is raised and no result is
produced.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any

from vercmp.cmp import Cmp
from vercmp.config.manifest import Manifest
from vercmp.exceptions import ParseError
from vercmp.logging import Logger, get_global_logger
from vercmp.version import ParserSpec, Version, parse_version


def _parse_all(
    versions: Iterable[str],
    parser: ParserSpec,
    manifest: Manifest | None,
    logger: Logger,
) -> list[Version]:
    parsed: list[Version] = []
    failed: list[str] = []
    for v in versions:
        try:
            parsed.append(parse_version(v, parser, manifest=manifest, logger=logger))
        except ParseError:
            failed.append(v)
    if failed:
        raise ParseError(*failed)
    return parsed


def compare(
    a: str,
    b: str,
    *,
    parser: ParserSpec = None,
    manifest: Manifest | None = None,
    logger: Logger | None = None,
) -> Cmp:
    """Compare two version strings.

    Returns:
        Cmp.LT if a < b, Cmp.EQ if equal, Cmp.GT if a > b.

    Raises:
        ParseError: If either (or both) strings cannot be parsed.

    Examples:
        >>> compare("1.2.3", "1.2.4")
        <Cmp.LT: '<'>
        >>> compare("1", "0.1")
        <Cmp.GT: '>'>
        >>> compare("1", "1.0.0")
        <Cmp.EQ: '=='>
    """
    if logger is None:
        logger = get_global_logger()
    va, vb = _parse_all((a, b), parser, manifest, logger)
    result = va.compare(vb)
    logger.verbose("COMPARE", f"{a!r} {result.sign} {b!r}")
    return result


def compare_to(
    a: str,
    b: str,
    operator: Cmp | str,
    *,
    parser: ParserSpec = None,
    manifest: Manifest | None = None,
    logger: Logger | None = None,
) -> bool:
    """Test whether `a <operator> b` holds.

    Args:
        a: Left-hand version string.
        b: Right-hand version string.
        operator: Any Cmp member, or its sign ("==", "!=", "<", "<=", ">=", ">").

    Raises:
        ParseError: If either (or both) strings cannot be parsed.
        ValueError: If `operator` is an unknown sign.

    Examples:
        >>> compare_to("1.2.3", "1.2", Cmp.NE)
        True
        >>> compare_to("1.2", "1.5.1", ">=")
        False
    """
    if logger is None:
        logger = get_global_logger()
    if isinstance(operator, str):
        operator = Cmp.from_sign(operator)
    va, vb = _parse_all((a, b), parser, manifest, logger)
    holds = va.compare_to(vb, operator)
    logger.verbose("COMPARE", f"{a!r} {operator.sign} {b!r} is {holds}")
    return holds


def is_newer(
    remote: str,
    current: str | None,
    *,
    parser: ParserSpec = None,
    manifest: Manifest | None = None,
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Returns True iff remote > current. A missing current version (None)
    makes any remote version newer.
    """
    if logger is None:
        logger = get_global_logger()
    if current is None:
        logger.verbose("COMPARE", f"No current version. Treat {remote!r} as newer")
        return True
    return (
        compare(remote, current, parser=parser, manifest=manifest, logger=logger)
        is Cmp.GT
    )


def version_key(
    *,
    parser: ParserSpec = None,
    manifest: Manifest | None = None,
) -> Callable[[str], Any]:
    """Build a sort key for version strings.

    Each key parses its string once, so invalid strings raise ParseError
    while sorting.

    Example:
        >>> sorted(["1.10", "1.2", "1.9"], key=version_key())
        ['1.2', '1.9', '1.10']
    """
    to_key = cmp_to_key(lambda x, y: x.compare(y).factor)

    def key(version: str) -> Any:
        return to_key(parse_version(version, parser, manifest=manifest))

    return key


def sort_versions(
    versions: Iterable[str],
    *,
    reverse: bool = False,
    parser: ParserSpec = None,
    manifest: Manifest | None = None,
    logger: Logger | None = None,
) -> list[str]:
    """Return the version strings ordered oldest first (newest first if reverse).

    Versions that compare equal keep their input order.

    Note:
        The order is only total when the versions share a segment layout
        (e.g. all numeric). Padding compares a trailing segment against its
        own type's empty value, so across types the relation is not
        transitive: "1.a" > "1" and "1" == "1.0", yet "1.a" < "1.0". Mixed
        input still sorts without error, but each neighbor pair is not
        guaranteed to be in order.

    Raises:
        ParseError: Naming every string that cannot be parsed.
    """
    if logger is None:
        logger = get_global_logger()
    values = list(versions)
    parsed = _parse_all(values, parser, manifest, logger)
    order = sorted(
        range(len(values)),
        key=cmp_to_key(lambda i, j: parsed[i].compare(parsed[j]).factor),
        reverse=reverse,
    )
    return [values[i] for i in order]
