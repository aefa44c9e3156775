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

"""Command-line interface for dewey.

Commands:

    compare: Compare two version strings
    tokens: Show how a version string is tokenized
    check: Run the all-pairs regression harness over fixture lists

Example:
    Compare two versions:
        ```bash
        $ dewey compare 1.0 1rc1
        1.0 > 1rc1
        $ dewey compare 7.3.2 7.3ce.1
        7.3.2 and 7.3ce.1 are incomparable
        ```

    Inspect tokenization:
        ```bash
        $ dewey tokens 1.2pl3
        ```

    Check fixture lists (falls back to `fixtures` from dewey.yaml):
        ```bash
        $ dewey check tests/fixtures/versions.txt --verbose
        ```

Exit Codes:

- 0: Success (an incomparable result is a success)
- 1: Error (configuration, fixture loading) or harness divergences found

Note:
    Version strings starting with "-" must follow "--", e.g.
    `dewey compare -- -1 1`.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
import traceback
from typing import Any

from dewey import __version__
from dewey.config import load_config
from dewey.exceptions import DeweyError
from dewey.harness import check_fixture
from dewey.logging import get_logger, set_global_logger
from dewey.results import HarnessResult
from dewey.versioning import Ordering, tokenize, ver_cmp

_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
}


def _setup(args: argparse.Namespace) -> dict[str, Any]:
    """Configure the global logger and load the effective config."""
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))
    config = load_config(args.config)
    if args.overflow:
        config["overflow"] = args.overflow
    return config


def _report_error(args: argparse.Namespace, err: Exception) -> int:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        traceback.print_exc()
    return 1


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'dewey compare' command.

    Prints "A < B", "A = B", "A > B" or "A and B are incomparable".

    Returns:
        Exit code (0 unless the configuration could not be loaded).
    """
    try:
        config = _setup(args)
    except DeweyError as err:
        return _report_error(args, err)

    result = ver_cmp(args.left, args.right, overflow=config["overflow"])
    if result is None:
        print(f"{args.left} and {args.right} are incomparable")
    else:
        print(f"{args.left} {_SYMBOLS[result]} {args.right}")
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Handler for 'dewey tokens' command. Prints one component per line."""
    try:
        config = _setup(args)
    except DeweyError as err:
        return _report_error(args, err)

    for component in tokenize(args.text, overflow=config["overflow"]):
        print(component)
    return 0


def _print_harness_result(result: HarnessResult) -> None:
    print("=" * 70)
    print("HARNESS RESULTS")
    print("=" * 70)
    print(f"Source:        {result.source}")
    print(f"Versions:      {result.versions}")
    print(f"Pairs:         {result.pairs}")
    print(f"Less:          {result.less}")
    print(f"Equal:         {result.equal}")
    print(f"Greater:       {result.greater}")
    print(f"Incomparable:  {result.incomparable}")
    print()

    if result.irreflexive:
        print(f"Not equal to themselves ({len(result.irreflexive)}):")
        for text in result.irreflexive:
            print(f"  [X] {text!r}")
        print()

    if result.asymmetric:
        print(f"Asymmetric pairs ({len(result.asymmetric)}):")
        for d in result.asymmetric:
            print(
                f"  [X] {d.left!r} vs {d.right!r}: "
                f"forward={d.forward!r} backward={d.backward!r}"
            )
        print()

    print("=" * 70)


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'dewey check' command.

    Runs the harness over every source given on the command line, or over
    the configured fixtures when none are given.

    Returns:
        Exit code (0 when every source loads and shows no divergence).
    """
    try:
        config = _setup(args)
    except DeweyError as err:
        return _report_error(args, err)

    sources = args.sources or config["fixtures"]
    if not sources:
        print("Error: no fixture lists given and none configured in dewey.yaml")
        return 1

    failed = 0
    for source in sources:
        try:
            result = check_fixture(
                source,
                overflow=config["overflow"],
                timeout=config["http"]["timeout"],
            )
        except DeweyError as err:
            _report_error(args, err)
            failed += 1
            continue

        _print_harness_result(result)
        if not result.ok:
            failed += 1

    print()
    if failed:
        print(f"[FAILED] {failed} of {len(sources)} fixture list(s) failed.")
        return 1
    print(f"[SUCCESS] {len(sources)} fixture list(s) checked, no divergences.")
    return 0


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose progress output",
    )
    common.add_argument(
        "--debug",
        action="store_true",
        help="Show debug output (implies --verbose)",
    )
    common.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to dewey.yaml (default: search upward from the current directory)",
    )
    common.add_argument(
        "--overflow",
        choices=("wrap", "saturate"),
        default=None,
        help="How numbers wider than 64 bits are folded (overrides dewey.yaml)",
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        prog="dewey",
        description="dewey - partial-order version string comparison",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"dewey {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )
    common = _common_options()

    parser_compare = subparsers.add_parser(
        "compare",
        parents=[common],
        help="Compare two version strings",
        description="Compare two version strings under the dewey partial order.",
    )
    parser_compare.add_argument("left", help="Left-hand version string")
    parser_compare.add_argument("right", help="Right-hand version string")
    parser_compare.set_defaults(func=cmd_compare)

    parser_tokens = subparsers.add_parser(
        "tokens",
        parents=[common],
        help="Show the components of a version string",
        description="Print each component the tokenizer emits, ending with End.",
    )
    parser_tokens.add_argument("text", help="Version string to tokenize")
    parser_tokens.set_defaults(func=cmd_tokens)

    parser_check = subparsers.add_parser(
        "check",
        parents=[common],
        help="Run the all-pairs harness over fixture lists",
        description=(
            "Compare every pair of versions in each fixture list and report "
            "reflexivity or antisymmetry divergences."
        ),
    )
    parser_check.add_argument(
        "sources",
        nargs="*",
        help="Fixture list paths or http(s) URLs (default: fixtures from dewey.yaml)",
    )
    parser_check.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the dewey CLI.

    Registered as the 'dewey' console script in pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
