#!/usr/bin/env python3
"""
Fuzzy Manpager Entry Point

This script provides a simple entry point for the fzm tool when it is run
from a checkout. All application logic is contained in the
fuzzy_manpager.libs.main_app module.
"""

import sys
from pathlib import Path

# Make the package importable when running from the repository root
sys.path.insert(0, str(Path(__file__).parent))

if __name__ == "__main__":
    try:
        from fuzzy_manpager.libs.main_app import main
    except ImportError as e:
        print(f"Error importing main application: {e}")
        print("Please install the requirements: pip install -e .")
        sys.exit(1)
    sys.exit(main())
