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

"""Exception hierarchy for segver.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors:

- ParseError: A version string could not be turned into a Version
  (NoMatchError, InvalidNumberError, InvalidGroupNameError, InvalidPatternError)
- ConfigError: Configuration-related errors (YAML parse, unknown patterns)

All exceptions inherit from SegverError, allowing users to catch all segver
errors with a single except clause if needed. ParseError also inherits from
ValueError, so callers that already guard version parsing with
``except ValueError`` keep working.

Example:
    Catching specific error types:
        ```python
        from segver.versioning import SIMPLE_PATTERN, parse
        from segver.exceptions import NoMatchError, ParseError

        try:
            version = parse("v1.2", SIMPLE_PATTERN)
        except NoMatchError as e:
            print(f"Not a simple version: {e.value}")
        except ParseError as e:
            print(f"Parse error: {e}")
        ```

Note:
    Comparison and selection never raise for valid Version objects. Only
    extraction and configuration loading report errors.
"""

from __future__ import annotations

__all__ = [
    "SegverError",
    "ParseError",
    "NoMatchError",
    "InvalidNumberError",
    "InvalidGroupNameError",
    "InvalidPatternError",
    "ConfigError",
]


class SegverError(Exception):
    """Base exception for all segver errors."""

    pass


class ParseError(SegverError, ValueError):
    """Raised when a version string cannot be extracted into a Version.

    Extraction is all-or-nothing: when this is raised no partial Version
    is produced.
    """

    pass


class NoMatchError(ParseError):
    """Raised when the pattern does not match the input at all.

    Attributes:
        value: The input string that failed to match.
        pattern: The regex source that was applied.
    """

    def __init__(self, value: str, pattern: str) -> None:
        self.value = value
        self.pattern = pattern
        super().__init__(
            f"failed parsing the version {value!r}: no match for pattern {pattern!r}"
        )


class InvalidNumberError(ParseError):
    """Raised when a number group captured text that is not an integer.

    Attributes:
        group: Name of the capture group (e.g., "d2").
        value: The captured substring.
    """

    def __init__(self, group: str, value: str) -> None:
        self.group = group
        self.value = value
        super().__init__(f"invalid value for number group {group}: {value!r}")


class InvalidGroupNameError(ParseError):
    """Raised when a capture group name cannot be resolved to a position.

    Attributes:
        group: The offending group name.
    """

    def __init__(self, group: str, reason: str = "invalid format") -> None:
        self.group = group
        super().__init__(f"{reason} for group name: {group}")


class InvalidPatternError(ParseError):
    """Raised when a pattern string is not a valid regular expression.

    Attributes:
        pattern: The pattern source that failed to compile.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"Invalid regex pattern: {pattern!r}")


class ConfigError(SegverError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, invalid structure)
    - Missing configuration files that were explicitly requested
    - Unknown or invalid pattern definitions

    Example:
        Catching configuration errors:
            ```python
            from segver.config import load_effective_config
            from segver.exceptions import ConfigError

            try:
                config = load_effective_config(Path("segver.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
