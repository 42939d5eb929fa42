#!/usr/bin/env python3
"""Modalview - a modal terminal text viewer.

Usage:
    python main.py [filename]

Controls (Normal mode):
    h j k l   Move left, down, up, right (column is remembered across rows)
    gg / G    Jump to first / last line
    i         Enter Insert mode
    Esc       Return to Normal mode (also Ctrl-C, Ctrl-[)
    :q Enter  Quit
"""

import sys
from modalview.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
