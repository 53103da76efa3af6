"""
Regex version extraction for segver.

This module turns a version string into a Version by applying a caller
supplied regular expression. The grammar lives entirely in the pattern:
capture group names decide where each captured substring lands and how
it is interpreted.

Functions
---------
parse : function
    Extract a Version from a string using a regex pattern.
must_parse : function
    Like parse, but treats any failure as a programming error.
parse_literal : function
    Build a Version from already-known parts without a regex.

Group Naming
------------
Every capture group contributes one segment, in declaration order:

1. ``(?P<dN>...)``: segment N (1-based), must be an integer.
2. ``(?P<sN>...)``: segment N, always text (even "007").
3. ``(?P<xN>...)`` with any other single-letter prefix: segment N,
   integer if it parses as one, otherwise text.
4. Unnamed ``(...)``: segment at the group's own index, auto-detected
   like rule 3.
5. ``(?P<raw>...)``: not a segment. Its substring replaces the full match
   as the Version's ``raw`` value.

An optional group that did not take part in the match produces an
undefined segment. Segments are collected from position 1 upward and stop
at the first missing position.

Examples
--------
Semantic versions:

    >>> from segver.versioning.regex import SEMVER_PATTERN, parse
    >>> v = parse("1.4.2-rc.1", SEMVER_PATTERN)
    >>> str(v)
    '1|4|2|rc.1|-'

Vendor formats with a custom pattern:

    >>> java = r"^(?P<d1>\\d+)\\.(?P<d2>\\d+)\\.(?P<d3>\\d+)(?:_(?P<d4>\\d+))?-(?P<d5>\\d+)$"
    >>> str(parse("1.8.0_372-3", java))
    '1|8|0|372|3'

Literal construction:

    >>> from segver.versioning.regex import parse_literal
    >>> str(parse_literal(21, 0, 1))
    '21|0|1'

Notes
-----
- Pure string processing; nothing is cached or stored
- ``re.search`` semantics: anchor the pattern with ^...$ to match whole strings
- Extraction is all-or-nothing; failures raise ParseError subclasses
"""

from __future__ import annotations

from collections.abc import Sequence
import re
from typing import Union

from segver.exceptions import (
    InvalidGroupNameError,
    InvalidNumberError,
    InvalidPatternError,
    NoMatchError,
    ParseError,
)
from segver.logging import Logger, get_global_logger
from segver.versioning.model import Version, VersionSegment, parse_int

# d(.d)(.d)
SIMPLE_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<d1>\d+)(?:\.(?P<d2>\d+))?(?:\.(?P<d3>\d+))?$"
)

# d.d.d(-s)(+s)
SEMVER_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<d1>\d+)\.(?P<d2>\d+)\.(?P<d3>\d+)(?:-(?P<s4>[^+]+))?(?:\+(?P<s5>.*))?$"
)

RAW_GROUP = "raw"
NUMBER_PREFIX = "d"
TEXT_PREFIX = "s"

_GROUP_NAME = re.compile(r"^(?P<prefix>[A-Za-z_])(?P<index>[0-9]+)$")

PatternLike = Union[str, re.Pattern[str]]
LiteralPart = Union[int, str, VersionSegment, Sequence[Union[int, str, VersionSegment]]]


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """Return ``pattern`` compiled, raising InvalidPatternError on bad syntax."""
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as err:
        raise InvalidPatternError(pattern) from err


def _group_slots(pattern: re.Pattern[str]) -> list[tuple[int, str, int, str]]:
    """Resolve every capture group to (group_number, name, position, kind).

    Kind is "d" (number), "s" (text) or "" (auto-detect). The raw group
    is reported with position 0.
    """
    names = {number: name for name, number in pattern.groupindex.items()}
    slots: list[tuple[int, str, int, str]] = []
    seen: dict[int, str] = {}
    for number in range(1, pattern.groups + 1):
        name = names.get(number)
        if name == RAW_GROUP:
            slots.append((number, name, 0, ""))
            continue
        if name is None:
            # Unnamed groups sit at their own declaration index
            name = f"p{number}"
            position, kind = number, ""
        else:
            m = _GROUP_NAME.match(name)
            if not m:
                raise InvalidGroupNameError(name)
            position = int(m.group("index"))
            if position < 1:
                raise InvalidGroupNameError(name, "position must be 1 or greater")
            prefix = m.group("prefix")
            kind = prefix if prefix in (NUMBER_PREFIX, TEXT_PREFIX) else ""
        if position in seen:
            raise InvalidGroupNameError(
                name, f"position {position} already taken by {seen[position]}"
            )
        seen[position] = name
        slots.append((number, name, position, kind))
    return slots


def _build_segment(name: str, kind: str, captured: str | None) -> VersionSegment:
    if not captured:
        # Group did not take part in the match, or captured ""
        return VersionSegment.undefined()
    if kind == NUMBER_PREFIX:
        n = parse_int(captured)
        if n is None:
            raise InvalidNumberError(name, captured)
        return VersionSegment.of_number(n)
    if kind == TEXT_PREFIX:
        return VersionSegment.of_text(captured)
    return VersionSegment.from_string(captured)


def parse(
    value: str, pattern: PatternLike, *, logger: Logger | None = None
) -> Version:
    """
    Extract a Version from a string using a regular expression.

    Parameters
    ----------
    value : str
        The version string to parse.
    pattern : str or re.Pattern
        Pattern whose capture groups describe the segments (see the module
        docstring for the naming rules).
    logger : Logger, optional
        Logger for debug output. Defaults to the global logger.

    Returns
    -------
    Version
        The parsed version. ``raw`` is the full match, or the ``raw``
        group's substring when that group participated. A group that
        did not participate, or that captured an empty string, yields an
        UNDEFINED segment at its position.

    Raises
    ------
    NoMatchError
        If the pattern does not match ``value``.
    InvalidNumberError
        If a ``dN`` group captured something that is not an integer.
    InvalidGroupNameError
        If a group name cannot be resolved to a segment position.
    InvalidPatternError
        If ``pattern`` is a string that is not a valid regex.

    Examples
    --------
        >>> parse("2.0", r"^(\\d+)(?:\\.(\\d+))?(?:-(.+))?$").segments[2].is_undefined
        True
    """
    if logger is None:
        logger = get_global_logger()

    compiled = compile_pattern(pattern)
    slots = _group_slots(compiled)

    m = compiled.search(value)
    if m is None:
        raise NoMatchError(value, compiled.pattern)

    raw = m.group(0)
    by_position: dict[int, VersionSegment] = {}
    for number, name, position, kind in slots:
        captured = m.group(number)
        if position == 0:
            if captured is not None:
                raw = captured
            continue
        by_position[position] = _build_segment(name, kind, captured)
        logger.debug("PARSE", f"{name} -> position {position}: {captured!r}")

    segments: list[VersionSegment] = []
    position = 1
    while position in by_position:
        segments.append(by_position[position])
        position += 1

    dropped = sorted(p for p in by_position if p > position)
    if dropped:
        logger.debug(
            "PARSE",
            f"Position {position} missing, ignoring positions {dropped} in {value!r}",
        )

    return Version(tuple(segments), raw=raw)


def must_parse(value: str, pattern: PatternLike) -> Version:
    """Parse a version known to match ``pattern``.

    Intended for constants and pre-validated input. A failure here is a
    programming error and is raised as RuntimeError.
    """
    try:
        return parse(value, pattern)
    except ParseError as err:
        raise RuntimeError(f"must_parse failed: {err}") from err


def _literal_segment(part: object) -> VersionSegment:
    if isinstance(part, VersionSegment):
        return part
    if isinstance(part, int) and not isinstance(part, bool):
        return VersionSegment.of_number(part)
    if isinstance(part, str):
        return VersionSegment.from_string(part)
    return VersionSegment.from_string(str(part))


def parse_literal(*parts: LiteralPart) -> Version:
    """Build a Version directly from known parts.

    Each part may be an int, a string (integer strings become numbers,
    other strings text), a VersionSegment, or a list/tuple of those which
    is flattened in order. Anything else is converted with ``str()``.

    Example:
        >>> parse_literal(1, "hello", 3) == parse_literal([1], ["hello", "3"])
        True
        >>> str(parse_literal("1.2.3".split(".")))
        '1|2|3'
    """
    segments: list[VersionSegment] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            segments.extend(_literal_segment(p) for p in part)
        else:
            segments.append(_literal_segment(part))
    return Version(tuple(segments))
