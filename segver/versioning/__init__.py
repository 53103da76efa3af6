"""
Version parsing, comparison and selection for segver.

This package turns free-form version strings into typed segments using a
caller-supplied regular expression, orders the results, and picks the
newest version that satisfies a partial constraint ("newest 2.1.x").

Modules
-------
model : module
    VersionSegment and Version types, core-version rendering.
keys : module
    Sortable keys and comparison of parsed versions.
regex : module
    Regex-driven extraction, literal construction, standard patterns.
select : module
    Constrained maximum selection (find_max).

Public API
----------
Version, VersionSegment, SegmentKind : types
    The segment model.
EMPTY_VERSION : Version
    Zero-segment version; the bottom of the order and a reference that
    accepts everything.
SIMPLE_PATTERN, SEMVER_PATTERN : re.Pattern
    Standard patterns for "N(.N)(.N)" and semantic versions.
parse, must_parse, parse_literal : function
    Build Version objects.
compare, greater_than, less_than, equals : function
    Compare two versions.
sort_versions, sorted_versions, version_key : function
    Order collections of versions.
find_max, find_max_generic, is_eligible : function
    Select the newest version matching a reference.

Comparison Rules
----------------
Versions are compared position by position:

1. If either segment is text, compare case-insensitively as text. Number
   and undefined segments read as empty text, and empty text beats any
   text, so "2.0" > "2.0-beta".
2. Otherwise compare numerically (undefined counts as 0).
3. If all shared positions are equal, more segments wins.

Examples
--------
    >>> from segver.versioning import SIMPLE_PATTERN, compare, parse
    >>> compare(parse("1.10", SIMPLE_PATTERN), parse("1.9", SIMPLE_PATTERN))
    1

    >>> from segver.versioning import find_max, parse_literal
    >>> versions = [parse(s, SIMPLE_PATTERN) for s in ["2.0.1", "2.1.0", "2.0.7"]]
    >>> find_max(versions, parse_literal(2, 0)).raw
    '2.0.7'
"""

from .keys import (
    compare,
    equals,
    greater_than,
    less_than,
    segment_key,
    sort_versions,
    sorted_versions,
    version_key,
)
from .model import EMPTY_VERSION, SegmentKind, Version, VersionSegment
from .regex import (
    SEMVER_PATTERN,
    SIMPLE_PATTERN,
    compile_pattern,
    must_parse,
    parse,
    parse_literal,
)
from .select import find_max, find_max_generic, is_eligible

__all__ = [
    "EMPTY_VERSION",
    "SEMVER_PATTERN",
    "SIMPLE_PATTERN",
    "SegmentKind",
    "Version",
    "VersionSegment",
    "compare",
    "compile_pattern",
    "equals",
    "find_max",
    "find_max_generic",
    "greater_than",
    "is_eligible",
    "less_than",
    "must_parse",
    "parse",
    "parse_literal",
    "segment_key",
    "sort_versions",
    "sorted_versions",
    "version_key",
]
