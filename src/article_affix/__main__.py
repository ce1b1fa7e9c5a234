"""Module entry point for running with python -m article_affix."""

import sys

from article_affix.cli import main

if __name__ == "__main__":
    sys.exit(main())
