"""Allow ``python -m mdxref``."""

import sys

from mdxref.cli import main

if __name__ == "__main__":
    sys.exit(main())
