#!/usr/bin/env python3
"""Script to check the current repository's workflows for outdated actions."""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gha_outdated.cli import main


if __name__ == "__main__":
    sys.exit(main())
