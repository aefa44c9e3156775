"""
dewey - partial-order version comparison

A Python library and small CLI for comparing package version strings the
way pkgsrc and xbps do. Version strings are split into numbers,
separators, pre-release/patch-level keywords and single characters, then
compared component by component under a partial order: two versions can
be less, equal, greater, or incomparable when they follow structurally
different numbering schemes.

dewey provides:
  - A total, allocation-light tokenizer that accepts any string
  - The component partial-order table
  - Version / VersionString types with ver_cmp() and rich comparisons
  - An all-pairs regression harness over newline-delimited fixture lists
  - dewey.yaml configuration for the harness and CLI

Quick Start
-----------
Compare two versions:

    $ dewey compare 1.0 1rc1
    1.0 > 1rc1

Check a fixture list for comparator divergences:

    $ dewey check tests/fixtures/versions.txt

For full CLI documentation:

    $ dewey --help

Package Structure
-----------------
cli : module
    Command-line interface with argparse.
versioning : package
    Tokenizer, partial-order table and comparison driver.
harness : module
    All-pairs regression harness.
io : package
    Fixture list loading from files and URLs.
config : package
    dewey.yaml discovery, loading and validation.

Public API
----------
    from dewey import ver_cmp, is_newer, Version, VersionString, Ordering
    from dewey.harness import check_fixture, run_all_pairs
    from dewey.config import load_config

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Dewey partial-order version string comparison"

from dewey.versioning import (
    Ordering,
    Version,
    VersionCmp,
    VersionString,
    is_newer,
    ver_cmp,
)

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "Ordering",
    "Version",
    "VersionCmp",
    "VersionString",
    "is_newer",
    "ver_cmp",
]
