"""Input operations for dewey.

Modules:

fixtures : module
    Fixture list loading from local files and http(s) URLs.

Public API:

load_versions : function
    Load newline-delimited version strings from a path or URL.
parse_versions : function
    Split fixture text into version strings.
make_session : function
    requests.Session with retry/backoff defaults.

Example:
    from dewey.io import load_versions

    versions = load_versions("tests/fixtures/versions.txt")
    print(f"{len(versions)} versions")

"""

from .fixtures import is_url, load_versions, make_session, parse_versions

__all__ = ["is_url", "load_versions", "make_session", "parse_versions"]
