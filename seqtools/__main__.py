"""Allow ``python -m seqtools``."""

import sys

from seqtools.cli import main

if __name__ == "__main__":
    sys.exit(main())
