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

"""Command-line interface for vercmp.

Commands:

    compare: Compare two versions and print the relation
    test: Check a relation; the exit code is the answer
    parse: Show how a version string is split into segments
    sort: Print versions in ascending (or descending) order

Example:
    Compare two versions:
        ```bash
        $ vercmp compare 1.2 1.5.1
        1.2 < 1.5.1
        ```

    Use in a shell condition:
        ```bash
        $ vercmp test "$INSTALLED" "<" 2.0 && echo "upgrade needed"
        ```

    PEP 440 parsing and a config file:
        ```bash
        $ vercmp compare 1.0.dev1 1.0 --parser pep440
        $ vercmp sort 1.10 1.2 1.9 --config vercmp.yaml
        ```

Exit Codes:

- 0: Success (for 'test': the relation holds)
- 1: Error (invalid version, bad configuration) or, for 'test', the
  relation does not hold

Note:
    The CLI uses argparse for command parsing. Each command has its own
    handler function (cmd_<command>). Options given on the command line
    override the config file. Verbose mode shows full tracebacks on errors.

"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
import traceback
from typing import Any

from vercmp.cmp import Cmp
from vercmp.compare import compare, compare_to, sort_versions
from vercmp.config import CompareConfig, load_config
from vercmp.exceptions import ConfigError, ParseError, VercmpError
from vercmp.logging import get_logger, set_global_logger
from vercmp.version import parse_version


def _load_effective_config(args: argparse.Namespace) -> CompareConfig:
    """Merge --config file with the command-line overrides."""
    overrides: dict[str, Any] = {}
    if args.parser is not None:
        overrides["parser"] = args.parser
    manifest: dict[str, Any] = {}
    if args.max_depth is not None:
        manifest["max_depth"] = args.max_depth
    if args.ignore_text:
        manifest["ignore_text"] = True
    if manifest:
        overrides["manifest"] = manifest
    config_path = Path(args.config) if args.config else None
    return load_config(config_path, overrides=overrides)


def _report_error(err: Exception, args: argparse.Namespace) -> int:
    print(f"Error: {err}", file=sys.stderr)
    if args.verbose or args.debug:
        traceback.print_exc()
    return 1


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'vercmp compare' command.

    Prints "<a> <sign> <b>" where sign is one of <, == or >.

    Returns:
        Exit code (0 for success, 1 for invalid input or configuration).

    """
    try:
        cfg = _load_effective_config(args)
        result = compare(args.a, args.b, parser=cfg.parser, manifest=cfg.manifest)
    except (ConfigError, ParseError) as err:
        return _report_error(err, args)

    print(f"{args.a} {result.sign} {args.b}")
    return 0


def cmd_test(args: argparse.Namespace) -> int:
    """Handler for 'vercmp test' command.

    Returns:
        Exit code (0 if the relation holds, 1 if it does not or on error).

    """
    try:
        operator = Cmp.from_sign(args.operator)
    except ValueError as err:
        return _report_error(err, args)

    try:
        cfg = _load_effective_config(args)
        holds = compare_to(
            args.a, args.b, operator, parser=cfg.parser, manifest=cfg.manifest
        )
    except (ConfigError, ParseError) as err:
        return _report_error(err, args)

    if args.verbose or args.debug:
        print(f"{args.a} {operator.sign} {args.b}: {'yes' if holds else 'no'}")
    return 0 if holds else 1


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'vercmp parse' command.

    Prints one parsed segment per line.

    """
    try:
        cfg = _load_effective_config(args)
        parsed = parse_version(args.version, cfg.parser, manifest=cfg.manifest)
    except (ConfigError, ParseError) as err:
        return _report_error(err, args)

    print(f"Version:   {parsed.version!r}")
    print(f"Parser:    {cfg.parser}")
    print(f"Segments:  {len(parsed)}")
    for i, segment in enumerate(parsed.segments):
        print(f"  [{i}] {segment!r}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'vercmp sort' command.

    Prints the versions one per line, oldest first (newest first with
    --reverse).

    """
    try:
        cfg = _load_effective_config(args)
        ordered = sort_versions(
            args.versions,
            reverse=args.reverse,
            parser=cfg.parser,
            manifest=cfg.manifest,
        )
    except (ConfigError, ParseError) as err:
        return _report_error(err, args)

    for v in ordered:
        print(v)
    return 0


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--parser",
        default=None,
        help="Segment parser to use: default or pep440 (default: from config)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Only compare the first N segments",
    )
    parser.add_argument(
        "--ignore-text",
        action="store_true",
        help="Ignore textual segments such as 'beta' or 'rc1'",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show comparison details",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show parsed segments and effective configuration (implies --verbose)",
    )


def _package_version() -> str:
    try:
        return version("vercmp")
    except PackageNotFoundError:
        from vercmp import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="vercmp",
        description="vercmp - compare version numbers in any format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"vercmp {_package_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two versions and print the relation",
        description="Compare version A to version B and print A <, == or > B.",
    )
    parser_compare.add_argument("a", help="First version")
    parser_compare.add_argument("b", help="Second version")
    _add_common_options(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'test' command
    parser_test = subparsers.add_parser(
        "test",
        help="Test a relation between two versions (exit code 0 if it holds)",
        description="Exit with 0 if 'A OPERATOR B' holds, 1 otherwise.",
    )
    parser_test.add_argument("a", help="First version")
    parser_test.add_argument(
        "operator",
        help="Comparison operator: ==, !=, <, <=, >=, >",
    )
    parser_test.add_argument("b", help="Second version")
    _add_common_options(parser_test)
    parser_test.set_defaults(func=cmd_test)

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Show the segments a version string is parsed into",
    )
    parser_parse.add_argument("version", help="Version string to parse")
    _add_common_options(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Print versions in ascending order",
    )
    parser_sort.add_argument("versions", nargs="+", help="Version strings to sort")
    parser_sort.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Sort newest first",
    )
    _add_common_options(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the vercmp CLI.

    This function is registered as the 'vercmp' console script in
    pyproject.toml.
    """
    args = build_parser().parse_args(argv)

    # Configure global logger
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    try:
        return args.func(args)
    except VercmpError as err:
        return _report_error(err, args)


if __name__ == "__main__":
    sys.exit(main())
