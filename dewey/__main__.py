"""Allow ``python -m dewey``."""

from dewey.cli import main

main()
