"""Allow ``python -m initkit``."""

import sys

from initkit.cli import main

if __name__ == "__main__":
    sys.exit(main())
