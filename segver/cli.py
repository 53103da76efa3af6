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

"""Command-line interface for segver.

This module provides the main CLI entry point for the segver tool, offering
commands to inspect, compare, sort and select version strings.

Commands:

    parse: Show the segments extracted from a version string
    compare: Compare two version strings
    sort: Sort version strings (arguments or stdin lines)
    max: Select the newest version matching a reference

Example:
    Sort versions from a file:
        ```bash
        $ segver sort < versions.txt
        ```

    Newest Java 21.0.1 build using a configured pattern:
        ```bash
        $ segver max --pattern java --reference 21.0.1 --numbers-only < tags.txt
        ```

    Enable debug output:
        ```bash
        $ segver parse 1.2.3-rc.1 --pattern semver --debug
        ```

Exit Codes:

- 0: Success
- 1: Error (invalid version, bad configuration, or no version selected)

Note:
    The CLI uses argparse for command parsing.
    Each command has its own handler function (cmd_<command>).
    Verbose mode shows full tracebacks on errors for debugging.
    Patterns are resolved through segver.yaml (see segver.config).

"""

from __future__ import annotations

import argparse
from importlib.metadata import version
from pathlib import Path
import re
import sys

from segver.config import load_effective_config, resolve_pattern
from segver.exceptions import ParseError, SegverError
from segver.logging import get_logger, set_global_logger
from segver.versioning import (
    EMPTY_VERSION,
    Version,
    compare,
    find_max,
    parse,
    parse_literal,
    sort_versions,
)


def _setup(args: argparse.Namespace) -> tuple[dict, re.Pattern[str]]:
    """Configure the global logger, then load config and the pattern."""
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    config_path = Path(args.config) if args.config else None
    config = load_effective_config(config_path)
    pattern = resolve_pattern(args.pattern, config)
    logger.verbose("CONFIG", f"Pattern: {pattern.pattern}")
    return config, pattern


def _report_error(args: argparse.Namespace, err: Exception) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def _read_inputs(args: argparse.Namespace) -> list[str]:
    """Versions from the command line, or non-blank stdin lines."""
    if args.versions:
        return list(args.versions)
    return [line.strip() for line in sys.stdin if line.strip()]


def _parse_all(
    values: list[str], pattern: re.Pattern[str], skip_invalid: bool
) -> list[Version]:
    parsed: list[Version] = []
    for value in values:
        try:
            parsed.append(parse(value, pattern))
        except ParseError as err:
            if not skip_invalid:
                raise
            print(f"[WARNING] Skipping {value!r}: {err}", file=sys.stderr)
    return parsed


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'segver parse' command.

    Prints every extracted segment with its kind, the core version and the
    raw value. Useful when writing a new pattern.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        _, pattern = _setup(args)
        v = parse(args.version, pattern)
    except SegverError as err:
        return _report_error(args, err)

    print(f"Raw:           {v.raw}")
    print(f"Segments:      {v}")
    for i, seg in enumerate(v.segments, start=1):
        print(f"  [{i}] {seg.kind.value:<9} {seg}")
    print(f"Core Version:  {v.core_version()}")
    print(f"Defined:       {v.defined_segment_count()}/{v.segment_count()}")
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'segver compare' command.

    Prints -1, 0 or 1 followed by a relation line.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        _, pattern = _setup(args)
        a = parse(args.a, pattern)
        b = parse(args.b, pattern)
    except SegverError as err:
        return _report_error(args, err)

    result = compare(a, b)
    relation = {-1: "is older than", 0: "is the same as", 1: "is newer than"}[result]
    print(result)
    print(f"{a.raw} {relation} {b.raw}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'segver sort' command.

    Prints the raw form of each version, one per line, in ascending order
    (descending with --reverse). Equal versions keep their input order.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    try:
        _, pattern = _setup(args)
        versions = _parse_all(_read_inputs(args), pattern, args.skip_invalid)
    except SegverError as err:
        return _report_error(args, err)

    sort_versions(versions, reverse=args.reverse)
    for v in versions:
        print(v.raw)
    return 0


def cmd_max(args: argparse.Namespace) -> int:
    """Handler for 'segver max' command.

    Selects the newest version whose segments match the dotted reference
    (e.g. "21.0.1"). Without --reference every version is eligible.

    Returns:
        Exit code (0 when a version was selected, 1 otherwise).
    """
    try:
        config, pattern = _setup(args)
        versions = _parse_all(_read_inputs(args), pattern, args.skip_invalid)
    except SegverError as err:
        return _report_error(args, err)

    reference = (
        parse_literal(args.reference.split(".")) if args.reference else EMPTY_VERSION
    )
    numbers_only = args.numbers_only
    if numbers_only is None:
        numbers_only = bool(config["defaults"].get("numbers_only"))

    best = find_max(versions, reference, numbers_only)
    if best is None:
        print(f"No version matches reference {args.reference or '(any)'}")
        return 1
    print(best.raw)
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-p",
        "--pattern",
        default=None,
        help="Configured pattern name or a literal regex (default: from config, 'simple')",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to segver.yaml (default: search upward from the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the segver CLI.

    This function is registered as the 'segver' console script in pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="segver",
        description="segver - parse, compare, sort and select free-form versions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"segver {version('segver')}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Show the segments extracted from a version string",
    )
    parser_parse.add_argument("version", help="Version string to parse")
    _add_common_arguments(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two version strings",
    )
    parser_compare.add_argument("a", help="First version")
    parser_compare.add_argument("b", help="Second version")
    _add_common_arguments(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort version strings",
        description="Sort versions given as arguments, or one per line on stdin.",
    )
    parser_sort.add_argument("versions", nargs="*", help="Versions (default: stdin)")
    parser_sort.add_argument(
        "--reverse",
        action="store_true",
        help="Newest first",
    )
    parser_sort.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Warn about and skip versions the pattern cannot parse",
    )
    _add_common_arguments(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    # 'max' command
    parser_max = subparsers.add_parser(
        "max",
        help="Select the newest version matching a reference",
        description="Select the newest version whose leading segments equal the reference.",
    )
    parser_max.add_argument("versions", nargs="*", help="Versions (default: stdin)")
    parser_max.add_argument(
        "-r",
        "--reference",
        default=None,
        help="Dotted reference version, e.g. 21.0.1 (default: any)",
    )
    parser_max.add_argument(
        "--numbers-only",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Ignore versions containing text segments (default: from config)",
    )
    parser_max.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Warn about and skip versions the pattern cannot parse",
    )
    _add_common_arguments(parser_max)
    parser_max.set_defaults(func=cmd_max)

    # Parse and dispatch
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
