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

"""Exception hierarchy for vercmp.

Library users can tell the two failure modes apart:

- ParseError: A version string could not be parsed into segments
- ConfigError: Configuration problems (YAML parse, unknown parser, bad fields)

Both inherit from VercmpError, so all vercmp errors can be caught with a
single except clause. Comparing two already parsed versions never raises.

Example:
    Catching parse failures:
        ```python
        from vercmp import compare
        from vercmp.exceptions import ParseError

        try:
            result = compare("1.2.3", "beta")
        except ParseError as e:
            print(f"Not a version: {e.versions}")
        ```
"""

from __future__ import annotations

__all__ = [
    "VercmpError",
    "ParseError",
    "ConfigError",
]


class VercmpError(Exception):
    """Base exception for all vercmp errors."""

    pass


class ParseError(VercmpError):
    """Raised when one or more version strings cannot be parsed.

    A string fails to parse when it splits into at least one segment and
    none of them is numeric (e.g. "alpha", "dev.beta"). Empty and
    separator-only strings are valid and parse to zero segments.

    Attributes:
        versions: Every input that failed to parse, in the order given. The
            string façade parses both sides before raising, so a comparison
            of two bad inputs reports both at once.

    """

    def __init__(self, *versions: str, message: str = "") -> None:
        self.versions = tuple(versions)
        if not message:
            listed = ", ".join(repr(v) for v in self.versions)
            noun = "version" if len(self.versions) == 1 else "versions"
            message = f"Invalid {noun}: {listed}"
        self.message = message
        super().__init__(message)


class ConfigError(VercmpError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - Missing or unreadable config files
    - YAML parsing (syntax errors, non-mapping documents)
    - Unknown or mistyped configuration fields
    - Unknown parser names

    Example:
        Catching configuration errors:
            ```python
            from vercmp.config import load_config
            from vercmp.exceptions import ConfigError

            try:
                config = load_config(Path("vercmp.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
