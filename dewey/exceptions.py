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

"""Exception hierarchy for dewey.

The comparator itself never raises: every string tokenizes, and two
versions that cannot be ordered produce an "incomparable" result rather
than an error. The exceptions below belong to the parts of the project
that touch the outside world:

- ConfigError: dewey.yaml problems (YAML parse, bad values, missing file)
- NetworkError: remote fixture lists that could not be fetched
- FixtureError: fixture lists that are unreadable or contain no versions

All of them inherit from DeweyError so callers can catch everything with
a single except clause.

Example:
    Running the regression harness from code:
        ```python
        from dewey.exceptions import DeweyError, NetworkError
        from dewey.harness import check_fixture

        try:
            result = check_fixture("https://example.com/versions.txt")
        except NetworkError as e:
            print(f"Could not fetch fixtures: {e}")
        except DeweyError as e:
            print(f"dewey error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "DeweyError",
    "ConfigError",
    "NetworkError",
    "FixtureError",
]


class DeweyError(Exception):
    """Base exception for all dewey errors."""

    pass


class ConfigError(DeweyError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - An explicitly requested config file that does not exist
    - YAML parsing (syntax errors, empty file, non-mapping top level)
    - Invalid values (unknown overflow policy, bad fixture list, bad timeout)

    Example:
        Catching configuration errors:
            ```python
            from dewey.config import load_config
            from dewey.exceptions import ConfigError

            try:
                config = load_config(Path("dewey.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class NetworkError(DeweyError):
    """Raised when a remote fixture list cannot be downloaded.

    Wraps connection failures, timeouts and non-2xx HTTP responses. The
    original requests exception is chained as __cause__.
    """

    pass


class FixtureError(DeweyError):
    """Raised for fixture lists that cannot be used by the harness.

    This covers missing or unreadable files, content that is not valid
    UTF-8, and lists that contain no version strings after blank lines
    and comments are dropped.
    """

    pass
