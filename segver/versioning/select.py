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

"""Constrained maximum selection for segver.

Answers questions like "what is the newest 2.1.x?" over a list of parsed
versions. The constraint is itself a Version (the *reference*): each
defined reference segment pins the candidate's segment at the same
position, undefined or missing reference segments leave it free.

Example:
    Newest Java 21.0.1 build:

        from segver.versioning import find_max, parse_literal

        best = find_max(versions, parse_literal(21, 0, 1), numbers_only=True)
        print(best.raw if best else "none")

    Ranking objects that carry a version:

        from segver.versioning import find_max_generic

        latest = find_max_generic(releases, lambda r: r.version, reference)

Note:
    Eligibility walks the candidate's own segments. Reference positions
    beyond the candidate's length are not checked, so the reference 2.1.5
    accepts a candidate that is just "2".
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from segver.logging import Logger, get_global_logger
from segver.versioning.keys import version_key
from segver.versioning.model import EMPTY_VERSION, Version

T = TypeVar("T")


def is_eligible(
    version: Version, reference: Version = EMPTY_VERSION, numbers_only: bool = False
) -> bool:
    """Check whether ``version`` satisfies the reference constraint.

    Args:
        version: Candidate version.
        reference: Partial version whose defined segments must be matched
            exactly by numeric candidate segments. A text reference
            segment matches no candidate.
        numbers_only: Reject candidates carrying any text segment.

    Returns:
        True if the candidate may be selected.
    """
    ref = reference.segments
    for i, segment in enumerate(version.segments):
        if numbers_only and segment.is_text:
            return False
        if i >= len(ref) or ref[i].is_undefined:
            continue
        if ref[i].is_text or not segment.is_number:
            return False
        if segment.number != ref[i].number:
            return False
    return True


def find_max_generic(
    candidates: Iterable[T],
    accessor: Callable[[T], Version],
    reference: Version = EMPTY_VERSION,
    numbers_only: bool = False,
    *,
    logger: Logger | None = None,
) -> T | None:
    """Return the candidate with the greatest eligible version.

    Args:
        candidates: Objects to choose from.
        accessor: Returns the Version carried by a candidate.
        reference: Constraint version; EMPTY_VERSION accepts everything.
        numbers_only: Skip candidates with text segments.
        logger: Logger for debug output. Defaults to the global logger.

    Returns:
        The selected candidate, or None if no candidate is eligible. On
        ties the first candidate seen wins.
    """
    if logger is None:
        logger = get_global_logger()

    best: T | None = None
    best_key = None
    considered = 0
    for candidate in candidates:
        considered += 1
        version = accessor(candidate)
        if not is_eligible(version, reference, numbers_only):
            logger.debug("SELECT", f"Skipping {version.raw or version}")
            continue
        key = version_key(version)
        if best_key is None or key > best_key:
            best, best_key = candidate, key

    if best is None:
        logger.verbose(
            "SELECT", f"No eligible version among {considered} (reference {reference})"
        )
    else:
        logger.verbose("SELECT", f"Selected {accessor(best).raw or accessor(best)}")
    return best


def find_max(
    versions: Iterable[Version],
    reference: Version = EMPTY_VERSION,
    numbers_only: bool = False,
    *,
    logger: Logger | None = None,
) -> Version | None:
    """Return the greatest version matching ``reference``, or None."""
    return find_max_generic(
        versions, lambda v: v, reference, numbers_only, logger=logger
    )
