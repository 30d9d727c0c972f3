#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--mines N] [--seed S] [--strict-win] [--verbose]
"""
from src.minesweeper.console import main


if __name__ == "__main__":
    raise SystemExit(main())
