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

"""Version string components and the tokenizer that produces them.

A version string is read left to right, one component at a time:

- a run of ASCII digits becomes Num(n)
- "." and "-" become DashOrDot
- the keywords "alpha", "beta", "pre", "rc" and "pl" become their modifiers
- anything else becomes Char(c), one code point at a time, with ASCII
  letters lower-cased
- the end of the string is End

The tokenizer is total: every input produces a component and every call on
non-empty input consumes at least one code point. Components are never
cached; the comparison driver asks for the next one at each step.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
import re
from typing import Literal

OverflowPolicy = Literal["wrap", "saturate"]
_OVERFLOW_POLICIES = ("wrap", "saturate")

# Numbers are unsigned 64-bit.
NUM_BITS = 64
NUM_MAX = (1 << NUM_BITS) - 1

# Digits folded per step when reducing a long run. Small enough that int()
# never approaches the interpreter's str->int digit limit.
_DIGIT_CHUNK = 18

_DIGITS = re.compile(r"[0-9]+")


class Kind(IntEnum):
    """Component variants. The value is the fixed total rank."""

    ALPHA = 0
    BETA = 1
    PRE = 2
    RC = 3
    PATCH_LEVEL = 4
    DASH_OR_DOT = 5
    END = 6
    NUM = 7
    CHAR = 8


@dataclass(frozen=True, slots=True)
class Component:
    """One token of a version string.

    Attributes:
        kind: Which variant this is.
        value: The number for NUM, the single character for CHAR, None for
            every other kind.

    """

    kind: Kind
    value: int | str | None = None

    @classmethod
    def num(cls, n: int) -> Component:
        if not 0 <= n <= NUM_MAX:
            raise ValueError(f"Num component out of 64-bit range: {n}")
        return cls(Kind.NUM, n)

    @classmethod
    def char(cls, c: str) -> Component:
        if len(c) != 1:
            raise ValueError(f"Char component must be one code point, got {c!r}")
        return cls(Kind.CHAR, c)

    def rank_key(self) -> tuple[int, int]:
        """Total rank of this component: (kind, payload).

        NUM compares by value and CHAR by code point when kinds match.
        """
        if self.kind is Kind.NUM:
            return (self.kind, self.value)  # type: ignore[return-value]
        if self.kind is Kind.CHAR:
            return (self.kind, ord(self.value))  # type: ignore[arg-type]
        return (self.kind, 0)

    def __str__(self) -> str:
        name = self.kind.name.title().replace("_", "")
        if self.kind is Kind.NUM:
            return f"{name}({self.value})"
        if self.kind is Kind.CHAR:
            return f"{name}({self.value!r})"
        return name


ALPHA = Component(Kind.ALPHA)
BETA = Component(Kind.BETA)
PRE = Component(Kind.PRE)
RC = Component(Kind.RC)
PATCH_LEVEL = Component(Kind.PATCH_LEVEL)
DASH_OR_DOT = Component(Kind.DASH_OR_DOT)
END = Component(Kind.END)

# Tried in this order; the first literal prefix match wins.
_KEYWORDS: tuple[tuple[str, Component], ...] = (
    (".", DASH_OR_DOT),
    ("-", DASH_OR_DOT),
    ("alpha", ALPHA),
    ("beta", BETA),
    ("pre", PRE),
    ("rc", RC),
    ("pl", PATCH_LEVEL),
)


def _fold_digits(run: str, overflow: OverflowPolicy) -> int:
    """Fold a digit run into an unsigned 64-bit value.

    "wrap" gives the same result as n = n * 10 + d in wrapping u64
    arithmetic. "saturate" clamps at NUM_MAX.
    """
    if overflow == "saturate":
        # 20 digits is the width of NUM_MAX; anything longer (ignoring
        # leading zeros) is already out of range.
        significant = run.lstrip("0")
        if len(significant) > len(str(NUM_MAX)):
            return NUM_MAX
        return min(int(significant or "0"), NUM_MAX)
    n = 0
    for i in range(0, len(run), _DIGIT_CHUNK):
        chunk = run[i : i + _DIGIT_CHUNK]
        n = (n * 10 ** len(chunk) + int(chunk)) & NUM_MAX
    return n


def _fold_char(c: str) -> str:
    """Lower-case ASCII letters only; everything else is returned as-is."""
    if c.isascii() and c.isalpha():
        return c.lower()
    return c


def eat_at(
    text: str,
    pos: int = 0,
    *,
    overflow: OverflowPolicy = "wrap",
) -> tuple[Component, int]:
    """Read the component starting at text[pos].

    This is the zero-copy form of the tokenizer: the caller keeps the
    original string and walks it by offset.

    Args:
        text: The whole version string.
        pos: Offset of the first unread code point.
        overflow: How digit runs wider than 64 bits are folded.

    Returns:
        A tuple (component, next_pos). next_pos > pos unless the input was
            already exhausted, in which case the component is END and
            next_pos == len(text).

    Raises:
        ValueError: If overflow is not "wrap" or "saturate".

    """
    if overflow not in _OVERFLOW_POLICIES:
        raise ValueError(f"unknown overflow policy {overflow!r}")
    if pos >= len(text):
        return END, len(text)

    m = _DIGITS.match(text, pos)
    if m:
        return Component(Kind.NUM, _fold_digits(m.group(), overflow)), m.end()

    for keyword, component in _KEYWORDS:
        if text.startswith(keyword, pos):
            return component, pos + len(keyword)

    return Component(Kind.CHAR, _fold_char(text[pos])), pos + 1


def eat_str(
    text: str, *, overflow: OverflowPolicy = "wrap"
) -> tuple[Component, str]:
    """Read the first component of text and return it with the remainder.

    Example:
        >>> eat_str("1.2rc3")
        (Component(kind=<Kind.NUM: 7>, value=1), '.2rc3')
        >>> eat_str("")
        (Component(kind=<Kind.END: 6>, value=None), '')

    """
    component, end = eat_at(text, 0, overflow=overflow)
    return component, text[end:]


def tokenize(text: str, *, overflow: OverflowPolicy = "wrap") -> Iterator[Component]:
    """Yield every component of text, ending with END."""
    pos = 0
    while True:
        component, pos = eat_at(text, pos, overflow=overflow)
        yield component
        if component.kind is Kind.END:
            return
