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

"""Public API return types for dewey.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from dewey.harness import check_fixture
        from dewey.results import HarnessResult

        result: HarnessResult = check_fixture("tests/fixtures/versions.txt")
        print(result.pairs, result.incomparable, result.ok)
        ```

Note:
    Domain types (Component, Version, Ordering) stay in dewey.versioning.
"""

from __future__ import annotations

from dataclasses import dataclass

from dewey.versioning import Ordering


@dataclass(frozen=True)
class PairDivergence:
    """A pair whose two comparison directions disagree.

    Attributes:
        left: First version string.
        right: Second version string.
        forward: Result of comparing left with right (None = incomparable).
        backward: Result of comparing right with left (None = incomparable).
    """

    left: str
    right: str
    forward: Ordering | None
    backward: Ordering | None


@dataclass(frozen=True)
class HarnessResult:
    """Result from an all-pairs regression run.

    Attributes:
        source: Where the versions came from (path, URL, or "<memory>").
        versions: Number of version strings compared.
        pairs: Number of ordered pairs compared (versions squared).
        less: Pairs that compared less.
        equal: Pairs that compared equal (self-comparisons included).
        greater: Pairs that compared greater.
        incomparable: Pairs with no order.
        irreflexive: Versions that did not compare equal to themselves.
        asymmetric: Pairs whose reverse comparison is not the mirror image.
    """

    source: str
    versions: int
    pairs: int
    less: int
    equal: int
    greater: int
    incomparable: int
    irreflexive: tuple[str, ...] = ()
    asymmetric: tuple[PairDivergence, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no divergence was found."""
        return not self.irreflexive and not self.asymmetric
