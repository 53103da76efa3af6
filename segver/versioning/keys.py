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

"""Core version comparison utilities for segver.

This module is grammar-agnostic: it never looks at version strings. It
orders already-parsed Version objects segment by segment through sortable
key tuples, so ``sorted(versions, key=version_key)`` and ``compare()`` can
never disagree.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from segver.versioning.model import Version, VersionSegment

# ----------------------------
# Keys
# ----------------------------

# Text ranks below every non-text segment: a number or an undefined segment
# reads as empty text, and empty text outranks "alpha", "beta", "rc", ...
_TEXT_RANK = 0
_NON_TEXT_RANK = 1

SegmentKey = tuple[int, object]


def segment_key(segment: VersionSegment) -> SegmentKey:
    """Sortable key for a single segment.

      (0, lowercase text) for text segments (case-insensitive)
      (1, number) for number segments
      (1, 0) for undefined segments
    """
    if segment.is_text:
        return (_TEXT_RANK, segment.text.lower())
    return (_NON_TEXT_RANK, segment.number)


def version_key(version: Version) -> tuple[SegmentKey, ...]:
    """Sortable key for a version.

    Tuple comparison gives the tie-break for free: when every shared
    position is equal, the longer tuple (more segments) is greater.
    """
    return tuple(segment_key(s) for s in version.segments)


# ----------------------------
# Comparison
# ----------------------------


def compare(a: Version, b: Version) -> int:
    """Compare two versions.
    Returns -1 if a < b, 0 if equal, 1 if a > b.
    """
    ka = version_key(a)
    kb = version_key(b)
    return (ka > kb) - (ka < kb)


def greater_than(a: Version, b: Version) -> bool:
    return compare(a, b) == 1


def less_than(a: Version, b: Version) -> bool:
    return compare(a, b) == -1


def equals(a: Version, b: Version) -> bool:
    return compare(a, b) == 0


def sort_versions(versions: MutableSequence[Version], *, reverse: bool = False) -> None:
    """Sort versions in place, ascending unless ``reverse`` is set.

    The sort is stable: versions that compare equal (e.g. "1.0-RC" and
    "1.0-rc") keep their input order.
    """
    if isinstance(versions, list):
        versions.sort(key=version_key, reverse=reverse)
        return
    ordered = sorted(versions, key=version_key, reverse=reverse)
    for i, v in enumerate(ordered):
        versions[i] = v


def sorted_versions(versions: Iterable[Version], *, reverse: bool = False) -> list[Version]:
    """Return a new stably sorted list of versions."""
    return sorted(versions, key=version_key, reverse=reverse)
