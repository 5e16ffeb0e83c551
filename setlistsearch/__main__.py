"""Allow running as `python -m setlistsearch`."""

from setlistsearch.cli import main

main()
