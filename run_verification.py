#!/usr/bin/env python
"""
RateVault Verification Suite Entry Point.

Check the conversion engine against the reference tables in test_values/.

Usage:
    python run_verification.py                        # Run all tables
    python run_verification.py --category length      # Run specific table
    python run_verification.py --list                 # List available tables
    python run_verification.py --create-sample speed  # Create sample reference file

For more options:
    python run_verification.py --help
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from verification.cli import main

if __name__ == "__main__":
    sys.exit(main())
