"""
Entry point for running lintbaseline as a module.

Usage:
    python -m lintbaseline show -b lint-baseline.xml
    python -m lintbaseline --help
"""

import sys
from lintbaseline.cli import main

if __name__ == "__main__":
    sys.exit(main())
