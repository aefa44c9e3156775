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

"""Comparison of whole version strings.

Both strings are tokenized in lock-step. Equal components move both sides
forward, the first definite difference decides the result, and the first
incomparable pair ends the comparison as incomparable no matter what
follows. The walk is by offset into the caller's strings, so nothing is
copied and no component outlives the step that produced it.

This module is format-agnostic: it does not read files or fetch anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from dewey.logging import Logger, get_global_logger

from .components import Kind, OverflowPolicy, eat_at
from .order import Ordering, real_cmp


def _compare_texts(a: str, b: str, overflow: OverflowPolicy) -> Ordering | None:
    i = j = 0
    while True:
        ca, i = eat_at(a, i, overflow=overflow)
        cb, j = eat_at(b, j, overflow=overflow)
        if ca.kind is Kind.END and cb.kind is Kind.END:
            return Ordering.EQUAL
        result = real_cmp(ca, cb)
        if result is not Ordering.EQUAL:
            return result


def _relation(*accepted: Ordering):
    """Build a rich comparison that is True when compare() is in accepted."""

    def op(self: Version, other: object) -> bool:
        if not isinstance(other, (Version, str, VersionCmp)):
            return NotImplemented
        return self.compare(other) in accepted

    return op


@dataclass(frozen=True, eq=False, slots=True)
class Version:
    """Immutable view over a version string.

    Holds the caller's text and nothing derived from it. Rich comparisons
    follow the dewey partial order: all of them are False when the two
    versions are incomparable (and != is True). Plain strings and other
    VersionCmp values on either side of an operator are treated as
    versions and read with this version's overflow policy.

    Versions are not hashable: "1", "1.0" and "1pl0" are equal but are
    different strings.

    Two Version objects with different overflow policies cannot be
    compared; the result would depend on which side is on the left.

    Attributes:
        text: The caller's version string, unchanged.
        overflow: How digit runs wider than 64 bits are folded.

    Example:
        >>> Version("1.0") == Version("1")
        True
        >>> Version("1rc1") < "1"
        True
        >>> Version("7.3.2").compare("7.3ce.1") is None
        True

    """

    text: str
    overflow: OverflowPolicy = field(default="wrap", kw_only=True)

    def __str__(self) -> str:
        return self.text

    def version(self) -> Version:
        return self

    def compare(self, other: VersionCmp | str) -> Ordering | None:
        """Compare against another version, plain string or VersionCmp.

        Returns:
            An Ordering, or None when the versions are incomparable.

        Raises:
            ValueError: If other is a Version with a different overflow
                policy.

        """
        if isinstance(other, Version) and other.overflow != self.overflow:
            raise ValueError(
                f"cannot compare versions with overflow policies "
                f"{self.overflow!r} and {other.overflow!r}"
            )
        text = _as_version(other, self.overflow).text
        return _compare_texts(self.text, text, self.overflow)

    ver_cmp = compare

    __eq__ = _relation(Ordering.EQUAL)
    __lt__ = _relation(Ordering.LESS)
    __le__ = _relation(Ordering.LESS, Ordering.EQUAL)
    __gt__ = _relation(Ordering.GREATER)
    __ge__ = _relation(Ordering.GREATER, Ordering.EQUAL)
    __hash__ = None  # type: ignore[assignment]


@runtime_checkable
class VersionCmp(Protocol):
    """Anything that can present itself as a dewey Version.

    Structural users provide both methods. Subclasses only need version();
    the inherited ver_cmp() compares the two Version views.
    """

    __slots__ = ()

    def version(self) -> Version:
        """Return a Version view over this value's text."""
        ...

    def ver_cmp(self, other: VersionCmp | str) -> Ordering | None:
        """Compare with another VersionCmp; None means incomparable."""
        return self.version().compare(other)


class VersionString(str, VersionCmp):
    """A str that compares with the dewey partial order via ver_cmp().

    Ordinary str comparison operators are left alone, so these still sort
    and hash like strings; use ver_cmp() or version() for version order.

    Example:
        >>> VersionString("1").ver_cmp(VersionString("1pl1"))
        <Ordering.LESS: -1>

    """

    __slots__ = ()

    def version(self) -> Version:
        return Version(str(self))


def _as_version(value: VersionCmp | str, overflow: OverflowPolicy = "wrap") -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        return Version(str(value), overflow=overflow)
    if isinstance(value, VersionCmp):
        return value.version()
    raise TypeError(f"cannot compare {type(value).__name__!r} as a version")


def ver_cmp(
    a: VersionCmp | str,
    b: VersionCmp | str,
    *,
    overflow: OverflowPolicy = "wrap",
    logger: Logger | None = None,
) -> Ordering | None:
    """Compare two version strings.

    Args:
        a: Left-hand version.
        b: Right-hand version.
        overflow: How digit runs wider than 64 bits are folded ("wrap" or
            "saturate").
        logger: Receives a debug line for incomparable pairs. Defaults to
            the global logger.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER, or None when the
            two strings follow different schemes and cannot be ordered.

    Example:
        >>> ver_cmp("1", "1.0")
        <Ordering.EQUAL: 0>
        >>> ver_cmp("1", "1rc1")
        <Ordering.GREATER: 1>
        >>> ver_cmp("7.3.2", "7.3ce.1") is None
        True

    """
    left = _as_version(a, overflow).text
    right = _as_version(b, overflow).text
    result = _compare_texts(left, right, overflow)
    if result is None:
        if logger is None:
            logger = get_global_logger()
        logger.debug("COMPARE", f"{left!r} and {right!r} are incomparable")
    return result


def is_newer(
    remote: VersionCmp | str,
    current: VersionCmp | str | None,
    *,
    overflow: OverflowPolicy = "wrap",
    logger: Logger | None = None,
) -> bool:
    """Decide if 'remote' should be considered newer than 'current'.

    Returns True iff remote > current. No current version counts as older
    than anything; an incomparable pair is never newer.
    """
    if logger is None:
        logger = get_global_logger()

    if current is None:
        logger.verbose("COMPARE", f"No current version; treating {remote!r} as newer")
        return True

    result = ver_cmp(remote, current, overflow=overflow, logger=logger)
    if result is None:
        logger.verbose(
            "COMPARE",
            f"Remote {remote!r} cannot be ordered against current {current!r}",
        )
        return False
    if result is Ordering.GREATER:
        logger.verbose("COMPARE", f"Remote {remote!r} is newer than current {current!r}")
    elif result is Ordering.EQUAL:
        logger.verbose("COMPARE", f"Remote {remote!r} is the same as current {current!r}")
    else:
        logger.verbose("COMPARE", f"Remote {remote!r} is older than current {current!r}")
    return result is Ordering.GREATER
