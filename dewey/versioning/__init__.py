"""
Dewey version comparison.

This package tokenizes version strings into typed components and compares
them under the dewey partial order used by pkgsrc and xbps style package
managers.

Modules
-------
components : module
    Component types and the tokenizer (eat_at, eat_str, tokenize).
order : module
    Ordering and the component partial-order table (real_cmp).
compare : module
    Version view, comparison driver and the public compare functions.

Public API
----------
Version : class
    Immutable view over a version string with rich comparisons.
VersionString : class
    str subclass exposing version() and ver_cmp().
VersionCmp : Protocol
    The capability both of the above implement.
Ordering : IntEnum
    LESS (-1), EQUAL (0), GREATER (1).
ver_cmp : function
    Compare two version strings; None means incomparable.
is_newer : function
    Check if a remote version is newer than the current version.

Ordering Rules
--------------
- Numbers compare numerically: "1" < "1.1", "1.10" > "1.9".
- Trailing separators and zeros add nothing: "1" == "1.0" == "1pl0".
- Pre-releases sort below the release: "1alpha" < "1beta1" < "1pre1" < "1rc1" < "1".
- A patch level sorts above it: "1" < "1pl1".
- Other letters are compared one at a time, ASCII case-insensitively.
- A separator facing a letter or a number is incomparable:
  "7.3.2" vs "7.3ce.1" has no order.

Examples
--------
    >>> from dewey.versioning import Ordering, ver_cmp
    >>> ver_cmp("1.0", "1") is Ordering.EQUAL
    True
    >>> ver_cmp("1rc1", "1")
    <Ordering.LESS: -1>
    >>> ver_cmp("7.3.2", "7.3ce.1") is None
    True

Notes
-----
- Comparison never raises for any str input.
- Incomparable is an expected outcome, logged at debug level only.
"""

from .components import (
    Component,
    Kind,
    OverflowPolicy,
    eat_at,
    eat_str,
    tokenize,
)
from .compare import (
    Version,
    VersionCmp,
    VersionString,
    is_newer,
    ver_cmp,
)
from .order import Ordering, real_cmp

__all__ = [
    "Component",
    "Kind",
    "OverflowPolicy",
    "Ordering",
    "Version",
    "VersionCmp",
    "VersionString",
    "eat_at",
    "eat_str",
    "is_newer",
    "real_cmp",
    "tokenize",
    "ver_cmp",
]
