"""
Entry point for module execution (``python -m typed_collection``).

This module delegates execution to the CLI handler in ``typed_collection.cli.__main__``.
"""

import sys
from typed_collection.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
