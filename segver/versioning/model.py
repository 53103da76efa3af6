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

"""Segment model for segver.

A Version is an ordered tuple of VersionSegment values plus the string it
was parsed from. Each segment is exactly one of:

- a number (``VersionSegment.of_number(21)``)
- a non-empty text token (``VersionSegment.of_text("beta")``)
- undefined (``VersionSegment.undefined()``), produced by optional capture
  groups that did not participate in the match

Both types are frozen dataclasses. Ordering and hashing of Version objects
delegate to segver.versioning.keys, so ``sorted()``, ``max()`` and set
membership all agree with ``compare()``. The ``raw`` string never takes
part in comparisons.

Example:
    >>> from segver.versioning.model import Version, VersionSegment
    >>> v = Version((VersionSegment.of_number(1), VersionSegment.of_text("a")))
    >>> str(v)
    '1|a'
    >>> v.core_version()
    '1.0.0'
"""

from __future__ import annotations

from dataclasses import dataclass, field
import enum
import functools
import re

from segver.versioning import keys

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Number segments hold signed 64-bit values
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


def parse_int(value: str) -> int | None:
    """Parse a signed decimal integer, or return None.

    Only ASCII digits with an optional sign are accepted, and the result
    must fit in a signed 64-bit integer.
    """
    if not _INT_RE.fullmatch(value):
        return None
    n = int(value)
    if n < INT_MIN or n > INT_MAX:
        return None
    return n


class SegmentKind(enum.Enum):
    NUMBER = "number"
    TEXT = "text"
    UNDEFINED = "undefined"


@dataclass(frozen=True)
class VersionSegment:
    """One position of a version.

    Attributes:
        kind: Which representation is active.
        value: ``int`` for NUMBER, non-empty ``str`` for TEXT, ``None``
            for UNDEFINED.

    Prefer the ``of_number``/``of_text``/``undefined``/``from_string``
    constructors over calling the dataclass directly.
    """

    kind: SegmentKind
    value: int | str | None = None

    def __post_init__(self) -> None:
        if self.kind is SegmentKind.NUMBER:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise TypeError(f"number segment requires an int, got {self.value!r}")
        elif self.kind is SegmentKind.TEXT:
            if not isinstance(self.value, str):
                raise TypeError(f"text segment requires a str, got {self.value!r}")
            if not self.value:
                raise ValueError("text segment requires a non-empty string")
        elif self.value is not None:
            raise TypeError(f"undefined segment carries no value, got {self.value!r}")

    @classmethod
    def of_number(cls, number: int) -> VersionSegment:
        return cls(SegmentKind.NUMBER, number)

    @classmethod
    def of_text(cls, text: str) -> VersionSegment:
        return cls(SegmentKind.TEXT, text)

    @classmethod
    def undefined(cls) -> VersionSegment:
        return _UNDEFINED

    @classmethod
    def from_string(cls, value: str) -> VersionSegment:
        """Build a segment from a string, detecting its kind.

        Integer strings become numbers, the empty string becomes undefined,
        anything else is kept as text.
        """
        if value == "":
            return _UNDEFINED
        n = parse_int(value)
        if n is not None:
            return cls(SegmentKind.NUMBER, n)
        return cls(SegmentKind.TEXT, value)

    @property
    def is_number(self) -> bool:
        return self.kind is SegmentKind.NUMBER

    @property
    def is_text(self) -> bool:
        return self.kind is SegmentKind.TEXT

    @property
    def is_undefined(self) -> bool:
        return self.kind is SegmentKind.UNDEFINED

    @property
    def number(self) -> int:
        """Numeric value, 0 for text and undefined segments."""
        return self.value if isinstance(self.value, int) else 0

    @property
    def text(self) -> str:
        """Text token, "" for number and undefined segments."""
        return self.value if isinstance(self.value, str) else ""

    def __str__(self) -> str:
        if self.kind is SegmentKind.UNDEFINED:
            return "-"
        return str(self.value)


_UNDEFINED = VersionSegment(SegmentKind.UNDEFINED)


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A parsed version.

    Attributes:
        segments: Ordered segments, most significant first.
        raw: The matched input (or the ``raw`` capture group). Empty for
            versions built from literal parts.

    """

    segments: tuple[VersionSegment, ...] = ()
    raw: str = field(default="")

    def __post_init__(self) -> None:
        # Accept any sequence but always store a tuple
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, "segments", tuple(self.segments))

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return "|".join(str(s) for s in self.segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return keys.version_key(self) == keys.version_key(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return keys.version_key(self) < keys.version_key(other)

    def __hash__(self) -> int:
        return hash(keys.version_key(self))

    def _number_at(self, index: int) -> int:
        if len(self.segments) > index:
            return self.segments[index].number
        return 0

    @property
    def major(self) -> int:
        return self._number_at(0)

    @property
    def minor(self) -> int:
        return self._number_at(1)

    @property
    def patch(self) -> int:
        return self._number_at(2)

    def core_version(self) -> str:
        """Render the numeric "major.minor.patch" core.

        The first missing or non-numeric position among the first three
        forces itself and every later position to 0, so ``[1, "a", 3]``
        renders as ``"1.0.0"``.
        """
        parts: list[int] = []
        truncated = False
        for i in range(3):
            seg = self.segments[i] if i < len(self.segments) else None
            if truncated or seg is None or not seg.is_number:
                truncated = True
                parts.append(0)
            else:
                parts.append(seg.number)
        return ".".join(str(p) for p in parts)

    def defined_segment_count(self) -> int:
        return sum(1 for s in self.segments if not s.is_undefined)

    def segment_count(self, include_trailing_undefined: bool = True) -> int:
        """Number of segments, optionally ignoring trailing undefined ones."""
        n = len(self.segments)
        if not include_trailing_undefined:
            while n > 0 and self.segments[n - 1].is_undefined:
                n -= 1
        return n

    def compare_to(self, other: Version) -> int:
        return keys.compare(self, other)

    def greater_than(self, other: Version) -> bool:
        return keys.compare(self, other) == 1

    def less_than(self, other: Version) -> bool:
        return keys.compare(self, other) == -1

    def equals(self, other: Version) -> bool:
        return keys.compare(self, other) == 0


# Zero segments: the bottom of the order and an unconstrained reference
EMPTY_VERSION = Version(())
