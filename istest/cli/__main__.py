"""
is-test CLI entry point.

Usage:
    python -m istest.cli file exists ~/.bashrc
    python -m istest.cli semver ge 1.4.0 1.2.3
    python -m istest.cli net port-open localhost 5432 --timeout-ms 250
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
