"""Module entry point for ``python -m tagsync``."""

import sys

from tagsync.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
