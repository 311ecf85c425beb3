"""Module entrypoint for `python -m queensgen`."""

import sys

from queensgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
