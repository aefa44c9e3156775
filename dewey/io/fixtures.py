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

"""Fixture list loading for the regression harness.

A fixture list is UTF-8 text with one version string per line, for example
a dump of every version a package repository has ever shipped. Lists can
live on disk or behind an http(s) URL.

Format rules:
- Only the line terminator is removed ("\\n" or "\\r\\n"). Leading and
  trailing spaces are part of the version string.
- Blank lines and lines starting with "#" are skipped.
- A leading UTF-8 byte order mark is dropped.

Network behavior:
- GET requests go through a requests.Session with urllib3 Retry (5 tries,
  exponential backoff on 429/5xx).
- Non-2xx responses, connection errors and timeouts raise NetworkError
  with the requests exception chained.

Example:
    Load a local list and a remote one:
        ```python
        from pathlib import Path
        from dewey.io import load_versions

        local = load_versions(Path("tests/fixtures/versions.txt"))
        remote = load_versions("https://example.com/versions.txt", timeout=10)
        ```
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from dewey import __version__
from dewey.exceptions import FixtureError, NetworkError
from dewey.logging import Logger, get_global_logger

DEFAULT_TIMEOUT = 30


def is_url(source: str | Path) -> bool:
    """Return True for http:// and https:// sources."""
    if isinstance(source, Path):
        return False
    return urlparse(source).scheme.lower() in ("http", "https")


def make_session() -> requests.Session:
    """Create a requests.Session with retry/backoff defaults.

    - Retries on common transient status codes.
    - Applies exponential backoff.
    - Identifies dewey in the User-Agent.
    """
    s = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=0.5,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
        raise_on_status=False,
    )
    s.headers.update({"User-Agent": f"dewey/{__version__}"})
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.mount("https://", HTTPAdapter(max_retries=retries))
    return s


def parse_versions(text: str) -> list[str]:
    """Split fixture text into version strings.

    Example:
        >>> parse_versions("# xbps\\n1.0\\r\\n\\n1.0rc1\\n")
        ['1.0', '1.0rc1']

    """
    versions: list[str] = []
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip() or line.startswith("#"):
            continue
        versions.append(line)
    return versions


def _fetch_text(url: str, timeout: int, logger: Logger) -> str:
    logger.verbose("HTTP", f"GET {url}")
    try:
        with make_session() as session:
            resp = session.get(url, timeout=timeout, allow_redirects=True)
            resp.raise_for_status()
    except requests.RequestException as err:
        raise NetworkError(f"failed to fetch fixture list {url}: {err}") from err

    logger.verbose("HTTP", f"Response: {resp.status_code} {resp.reason}")
    try:
        return resp.content.decode("utf-8-sig")
    except UnicodeDecodeError as err:
        raise FixtureError(f"fixture list is not valid UTF-8: {url}") from err


def _read_text(path: Path, logger: Logger) -> str:
    logger.verbose("FIXTURE", f"Reading: {path}")
    try:
        data = path.read_bytes()
    except OSError as err:
        raise FixtureError(f"cannot read fixture list {path}: {err}") from err
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as err:
        raise FixtureError(f"fixture list is not valid UTF-8: {path}") from err


def load_versions(
    source: str | Path,
    *,
    timeout: int = DEFAULT_TIMEOUT,
    logger: Logger | None = None,
) -> list[str]:
    """Load a fixture list from a file path or an http(s) URL.

    Args:
        source: Local path, or an http:// / https:// URL.
        timeout: Per-request timeout in seconds (URLs only).
        logger: Logger for progress messages. Defaults to the global logger.

    Returns:
        The version strings in file order (duplicates kept).

    Raises:
        NetworkError: When a URL cannot be fetched or answers non-2xx.
        FixtureError: When a file cannot be read, the content is not UTF-8,
            or no version strings remain after skipping blanks and comments.

    """
    if logger is None:
        logger = get_global_logger()

    if is_url(source):
        text = _fetch_text(str(source), timeout, logger)
    else:
        text = _read_text(Path(source), logger)

    versions = parse_versions(text)
    if not versions:
        raise FixtureError(f"fixture list contains no versions: {source}")
    logger.verbose("FIXTURE", f"Loaded {len(versions)} version(s) from {source}")
    return versions
