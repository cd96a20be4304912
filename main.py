#!/usr/bin/env python3
"""termedit - A minimal screen-oriented text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys: Move the cursor
    Type to insert text, Tab inserts four spaces
    Enter: Split the line
    Backspace / Delete: Delete backward / forward, joining lines at the edges
    Ctrl-Q: Quit (nothing is saved)
"""

import sys
from termedit.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
