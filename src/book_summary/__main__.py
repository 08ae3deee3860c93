"""Module entry point for running with python -m book_summary."""

import sys

from book_summary.cli import main

if __name__ == "__main__":
    sys.exit(main())
