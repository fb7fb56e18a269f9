#!/usr/bin/env python3
"""
calclog Entry Point

Run with:
    python run_calculator.py                      # default ./log directory
    python run_calculator.py ./logs               # custom log directory
    python run_calculator.py ./logs 3 + 4         # one calculation, then the menu
"""

import sys
import os

# Make the calclog package importable without installing it
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from calclog.menu import main


if __name__ == "__main__":
    sys.exit(main())
