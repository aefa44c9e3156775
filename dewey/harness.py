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

"""All-pairs regression harness.

Feeds every ordered pair of a fixture list through the comparator. The
comparator must return a result for every pair; on top of that the harness
checks two laws any partial order has to obey:

- reflexivity: every version compares equal to itself
- antisymmetry: compare(b, a) is the mirror of compare(a, b), and an
  incomparable pair is incomparable both ways

Incomparable pairs are counted, not reported: different version schemes
in one list are expected.

Example:
    ```python
    from dewey.harness import check_fixture

    result = check_fixture("tests/fixtures/versions.txt")
    if not result.ok:
        for d in result.asymmetric:
            print(d.left, d.right, d.forward, d.backward)
    ```
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from dewey.io.fixtures import DEFAULT_TIMEOUT, load_versions
from dewey.logging import Logger, get_global_logger
from dewey.results import HarnessResult, PairDivergence
from dewey.versioning import Ordering, OverflowPolicy, Version


def _mirrors(forward: Ordering | None, backward: Ordering | None) -> bool:
    if forward is None or backward is None:
        return forward is None and backward is None
    return backward is forward.reverse()


def run_all_pairs(
    versions: Sequence[str],
    *,
    overflow: OverflowPolicy = "wrap",
    source: str = "<memory>",
    logger: Logger | None = None,
) -> HarnessResult:
    """Compare every ordered pair of versions (self-pairs included).

    Args:
        versions: Version strings to compare.
        overflow: Numeric overflow policy passed to the comparator.
        source: Label recorded in the result.
        logger: Logger for progress. Defaults to the global logger.

    Returns:
        HarnessResult with outcome counts and any divergences.

    """
    if logger is None:
        logger = get_global_logger()

    views = [Version(v, overflow=overflow) for v in versions]
    counts = {Ordering.LESS: 0, Ordering.EQUAL: 0, Ordering.GREATER: 0, None: 0}
    irreflexive: list[str] = []
    asymmetric: list[PairDivergence] = []

    for i, a in enumerate(views):
        for j, b in enumerate(views):
            forward = a.compare(b)
            counts[forward] += 1
            if i == j:
                if forward is not Ordering.EQUAL:
                    logger.verbose("HARNESS", f"{a.text!r} is not equal to itself")
                    irreflexive.append(a.text)
            elif i < j:
                # Each unordered pair is checked once, on its first visit.
                backward = b.compare(a)
                if not _mirrors(forward, backward):
                    logger.verbose(
                        "HARNESS",
                        f"{a.text!r} vs {b.text!r} gave {forward!r}, "
                        f"reverse gave {backward!r}",
                    )
                    asymmetric.append(PairDivergence(a.text, b.text, forward, backward))

    n = len(views)
    return HarnessResult(
        source=source,
        versions=n,
        pairs=n * n,
        less=counts[Ordering.LESS],
        equal=counts[Ordering.EQUAL],
        greater=counts[Ordering.GREATER],
        incomparable=counts[None],
        irreflexive=tuple(irreflexive),
        asymmetric=tuple(asymmetric),
    )


def check_fixture(
    source: str | Path,
    *,
    overflow: OverflowPolicy = "wrap",
    timeout: int = DEFAULT_TIMEOUT,
    logger: Logger | None = None,
) -> HarnessResult:
    """Load a fixture list and run the all-pairs harness over it.

    Args:
        source: Local path or http(s) URL of a newline-delimited list.
        overflow: Numeric overflow policy passed to the comparator.
        timeout: Per-request timeout in seconds for URL sources.
        logger: Logger for progress. Defaults to the global logger.

    Returns:
        HarnessResult for the loaded list.

    Raises:
        NetworkError: If a URL source cannot be fetched.
        FixtureError: If the list cannot be read or is empty.

    """
    if logger is None:
        logger = get_global_logger()

    logger.step(1, 2, f"Loading fixture list: {source}")
    versions = load_versions(source, timeout=timeout, logger=logger)

    logger.step(2, 2, f"Comparing {len(versions) ** 2} pairs...")
    result = run_all_pairs(
        versions, overflow=overflow, source=str(source), logger=logger
    )
    logger.verbose(
        "HARNESS",
        f"less={result.less} equal={result.equal} greater={result.greater} "
        f"incomparable={result.incomparable}",
    )
    return result
