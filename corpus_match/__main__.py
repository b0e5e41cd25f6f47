# Path: corpus_match/__main__.py
"""
Module entry point for corpus_match.

Allows running the module with:
    python -m corpus_match --cpc H04N21 FILE...
"""

import sys

from .main import main

if __name__ == '__main__':
    sys.exit(main())
