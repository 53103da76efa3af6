"""
segver - segmented version parsing

A Python library and small CLI for working with version strings that do
not follow a single grammar: simple dotted numbers, semantic versions and
vendor formats such as ``1.8.0_372-3``.

segver provides:
  - Regex-driven extraction of typed segments (number, text, undefined)
  - A total order over parsed versions with well-defined tie-breaks
  - Stable sorting
  - Constrained maximum selection ("newest 2.1.x")
  - YAML configuration of named patterns

Quick Start
-----------
    >>> from segver import SIMPLE_PATTERN, find_max, parse, parse_literal
    >>> versions = [parse(s, SIMPLE_PATTERN) for s in ["2.1.3", "2.1.10", "2.2.0"]]
    >>> find_max(versions, parse_literal(2, 1)).raw
    '2.1.10'

From the shell:

    $ segver max --reference 2.1 2.1.3 2.1.10 2.2.0

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
config : package
    YAML configuration loading and merging.
versioning : package
    Segment model, extraction, comparison and selection.
exceptions : module
    Exception hierarchy.
logging : module
    Logger protocol used by library and CLI.

Project Information
-------------------
License: Apache-2.0
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Parse, compare, sort and select free-form version strings"

from segver.exceptions import (
    ConfigError,
    InvalidGroupNameError,
    InvalidNumberError,
    InvalidPatternError,
    NoMatchError,
    ParseError,
    SegverError,
)
from segver.versioning import (
    EMPTY_VERSION,
    SEMVER_PATTERN,
    SIMPLE_PATTERN,
    SegmentKind,
    Version,
    VersionSegment,
    compare,
    find_max,
    find_max_generic,
    must_parse,
    parse,
    parse_literal,
    sort_versions,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "EMPTY_VERSION",
    "SEMVER_PATTERN",
    "SIMPLE_PATTERN",
    "SegmentKind",
    "Version",
    "VersionSegment",
    "compare",
    "find_max",
    "find_max_generic",
    "must_parse",
    "parse",
    "parse_literal",
    "sort_versions",
    "SegverError",
    "ParseError",
    "NoMatchError",
    "InvalidNumberError",
    "InvalidGroupNameError",
    "InvalidPatternError",
    "ConfigError",
]
