"""
vercmp - compare version numbers in any format

A Python library and CLI for parsing free-form version strings and comparing
them, without requiring a single rigid format such as semantic versioning.

vercmp provides:
  - Tolerant parsing: ".", "-", "_" and whitespace are all separators
  - Three-way comparison (Cmp.LT, Cmp.EQ, Cmp.GT) and operator tests
  - Trailing zeros are insignificant ("1" == "1.0.0")
  - Pluggable parsers, including a PEP 440-style parser for dev/pre/post
  - YAML configuration for the parser and depth/text settings

Quick Start
-----------
Compare two version strings:

    >>> from vercmp import Cmp, compare, compare_to
    >>> compare("1.2", "1.5.1")
    <Cmp.LT: '<'>
    >>> compare_to("1.2", "1.5.1", Cmp.LE)
    True

Parse once, compare many times:

    >>> from vercmp import parse_version
    >>> a = parse_version("1.2")
    >>> b = parse_version("1.5.1")
    >>> a < b
    True

From the shell:

    $ vercmp compare 1.2 1.5.1
    $ vercmp test 1.0.post1 ">" 1.0 --parser pep440

Package Structure
-----------------
segments : module
    Segment types and the pairwise segment comparator.
parsers : package
    Segment parser protocol, registry and built-in parsers.
version : module
    Version and parse_version.
cmp : module
    Comparison operators and their algebra.
compare : module
    String-level helpers: compare, compare_to, is_newer, sorting.
config : package
    Manifest settings and YAML configuration loading.
cli : module
    Command-line interface with argparse.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "Compare version numbers in any format"

from vercmp.cmp import Cmp, satisfies
from vercmp.compare import compare, compare_to, is_newer, sort_versions, version_key
from vercmp.config import Manifest
from vercmp.exceptions import ConfigError, ParseError, VercmpError
from vercmp.parsers import default_parser, pep440_parser, register_parser
from vercmp.version import Version, parse_version

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "Cmp",
    "satisfies",
    "compare",
    "compare_to",
    "is_newer",
    "sort_versions",
    "version_key",
    "Manifest",
    "Version",
    "parse_version",
    "default_parser",
    "pep440_parser",
    "register_parser",
    "VercmpError",
    "ParseError",
    "ConfigError",
]
