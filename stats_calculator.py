#!/usr/bin/env python3
"""
Descriptive Statistics Calculator
=================================
Thin entry-point. All logic lives in src.calculator and src.engine.

Usage:
  From a file:   python3 stats_calculator.py numbers.txt
  From stdin:    seq 1 100 | python3 stats_calculator.py -
  Options:       python3 stats_calculator.py --help
"""

from src.calculator.cli import main

if __name__ == "__main__":
    main()
