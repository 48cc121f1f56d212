#!/usr/bin/env python3
"""
ScrollSnap demo launcher.

Run this from the project root to open the five-page carousel demo.
"""

import sys

if __name__ == '__main__':
    from scrollsnap.run_gui import install_crash_handlers, run_gui, suppress_warnings
    suppress_warnings()
    install_crash_handlers()
    sys.exit(run_gui())
