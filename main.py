#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py show [--seed S]
"""
import sys
from pathlib import Path

# Add src to path so the script runs from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper.cli import main


if __name__ == "__main__":
    main()
