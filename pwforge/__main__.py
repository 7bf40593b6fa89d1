"""Entry point for `python -m pwforge`."""

import sys

from pwforge.cli import main

if __name__ == "__main__":
    sys.exit(main())
