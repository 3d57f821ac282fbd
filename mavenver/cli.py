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

"""Command-line interface for mavenver.

Commands:

    parse: Show canonical form and token list of each version
    compare: Show how consecutive versions order against each other
    sort: Print versions in ascending (or descending) order

Example:
    Compare versions:
        ```bash
        $ mavenver compare 1.0-alpha-1 1.0 1.0-sp
        1. 1.0-alpha-1 -> 1-alpha-1; tokens: [1, [alpha, [1]]]
           1.0-alpha-1 < 1.0
        2. 1.0 -> 1; tokens: [1]
           1.0 < 1.0-sp
        3. 1.0-sp -> 1-sp; tokens: [1, [sp]]
        ```

    Sort versions, newest first:
        ```bash
        $ mavenver sort 1.10 1.9 1.9-rc1 --reverse
        ```

Exit Codes:

- 0: Success
- 1: Error (a version could not be parsed)

Note:
    Debug mode prints the token tree of every parsed version as it is
    parsed. Verbose and debug modes show full tracebacks on errors.
"""

from __future__ import annotations

import argparse
import sys

from mavenver import __version__
from mavenver.exceptions import MavenVerError
from mavenver.logging import get_logger, set_global_logger
from mavenver.version import describe, explain, parse


def _configure_logger(args: argparse.Namespace) -> None:
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))


def _report_error(err: MavenVerError, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()
    return 1


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'mavenver parse' command.

    Args:
        args: Parsed command-line arguments containing the versions and
            verbosity flags.

    Returns:
        Exit code (0 for success, 1 if any version fails to parse).
    """
    _configure_logger(args)

    try:
        results = [describe(v) for v in args.versions]
    except MavenVerError as err:
        return _report_error(err, args)

    for result in results:
        print(f"Version:    {result.original}")
        print(f"Canonical:  {result.canonical}")
        print(f"Tokens:     {result.tokens}")
        print()
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'mavenver compare' command.

    Prints every version with its canonical form and tokens, and between
    each consecutive pair the relation that holds between them.

    Args:
        args: Parsed command-line arguments containing the versions and
            verbosity flags.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    _configure_logger(args)

    if len(args.versions) < 2:
        print("Error: compare needs at least two versions")
        return 1

    try:
        described = [describe(v) for v in args.versions]
        relations = [
            explain(a, b) for a, b in zip(args.versions, args.versions[1:])
        ]
    except MavenVerError as err:
        return _report_error(err, args)

    for i, result in enumerate(described):
        print(f"{i + 1}. {result.original} -> {result.canonical}; tokens: {result.tokens}")
        if i < len(relations):
            rel = relations[i]
            print(f"   {rel.left} {rel.symbol} {rel.right}")
    return 0


def cmd_sort(args: argparse.Namespace) -> int:
    """Handler for 'mavenver sort' command.

    The sort is stable, so versions that compare equal ("1.0" and "1")
    keep their input order.

    Args:
        args: Parsed command-line arguments containing the versions, the
            reverse flag and verbosity flags.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    _configure_logger(args)

    try:
        versions = [parse(v) for v in args.versions]
    except MavenVerError as err:
        return _report_error(err, args)

    for v in sorted(versions, reverse=args.reverse):
        print(v.original)
    return 0


def _add_verbosity(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show comparison details",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show the token tree of each parsed version (implies --verbose)",
    )


def main() -> None:
    """Main entry point for the mavenver CLI.

    This function is registered as the 'mavenver' console script in
    pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="mavenver",
        description="Parse and order version strings the way Maven does",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"mavenver {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Show canonical form and tokens of versions",
        description="Parse each version and print its canonical form and token tree.",
    )
    parser_parse.add_argument("versions", nargs="+", help="Version strings")
    _add_verbosity(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare consecutive versions",
        description="Display versions as parsed (canonical form and tokens) and how each compares to the next.",
    )
    parser_compare.add_argument("versions", nargs="+", help="Version strings")
    _add_verbosity(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'sort' command
    parser_sort = subparsers.add_parser(
        "sort",
        help="Sort versions",
        description="Print the given versions in ascending order.",
    )
    parser_sort.add_argument("versions", nargs="+", help="Version strings")
    parser_sort.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Sort newest first",
    )
    _add_verbosity(parser_sort)
    parser_sort.set_defaults(func=cmd_sort)

    # Parse and dispatch
    args = parser.parse_args()

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
