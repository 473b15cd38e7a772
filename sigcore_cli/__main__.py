"""
Module execution entry point.

Allows running with: python -m sigcore_cli
"""

import sys
from sigcore_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
