#!/usr/bin/env python3
"""
lconvert main entry point for running as a module: python3 -m lconvert
"""

import sys
from lconvert.cli import main

if __name__ == '__main__':
    sys.exit(main())
