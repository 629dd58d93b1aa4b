#!/usr/bin/env python3
"""
Blob Menu — quick launcher.

Usage:
    python run_blobmenu.py [options]

Run ``python run_blobmenu.py --help`` for full options.
"""

from blobmenu.app import main

if __name__ == "__main__":
    main()
