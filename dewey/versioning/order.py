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

"""Partial order between two version components.

Components follow a fixed total rank

    Alpha < Beta < Pre < Rc < PatchLevel < DashOrDot < End < Num < Char

with a handful of exceptions. Separators and a zero number carry no
further information, so they equal End. A separator or patch marker facing
a number or letter from a differently shaped version string has no
meaningful order, so those pairs are incomparable.

Exceptions are stored once, keyed by the pair sorted by rank, and looked up
before falling back to the rank itself.
"""

from __future__ import annotations

from enum import IntEnum

from .components import Component, Kind


class Ordering(IntEnum):
    """Outcome of a definite comparison. Equal to the usual -1/0/1."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        return Ordering(-self.value)


# (smaller-ranked kind, larger-ranked kind)
_EQUAL_TO_END: frozenset[tuple[Kind, Kind]] = frozenset(
    {
        (Kind.PATCH_LEVEL, Kind.END),
        (Kind.DASH_OR_DOT, Kind.END),
    }
)

_INCOMPARABLE: frozenset[tuple[Kind, Kind]] = frozenset(
    {
        (Kind.NUM, Kind.CHAR),
        (Kind.PATCH_LEVEL, Kind.DASH_OR_DOT),
        (Kind.PATCH_LEVEL, Kind.NUM),
        (Kind.DASH_OR_DOT, Kind.NUM),
        (Kind.DASH_OR_DOT, Kind.CHAR),
    }
)


def _by_rank(a: tuple, b: tuple) -> Ordering:
    return Ordering((a > b) - (a < b))


def real_cmp(a: Component, b: Component) -> Ordering | None:
    """Compare two components.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER for a < b, a == b
            and a > b, or None when the pair is incomparable.

    Example:
        >>> from dewey.versioning.components import END, DASH_OR_DOT, Component
        >>> real_cmp(END, Component.num(0))
        <Ordering.EQUAL: 0>
        >>> real_cmp(DASH_OR_DOT, Component.num(1)) is None
        True

    """
    ka, kb = a.rank_key(), b.rank_key()
    lo, hi = (a, b) if ka <= kb else (b, a)
    pair = (lo.kind, hi.kind)

    if pair == (Kind.END, Kind.NUM) and hi.value == 0:
        return Ordering.EQUAL
    if pair in _EQUAL_TO_END:
        return Ordering.EQUAL
    if pair in _INCOMPARABLE:
        return None
    return _by_rank(ka, kb)
