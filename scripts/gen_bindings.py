#!/usr/bin/env python3
"""
gen_bindings.py - JSObject binding generator entry point

Generates NAME.g.cs next to each NAME.cs declaration file.

Usage:
    python scripts/gen_bindings.py [--property-accessors] FILE...
"""

import os
import sys

# Add scripts directory to path
script_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, script_dir)

from jsbind.cli import main


if __name__ == '__main__':
    sys.exit(main())
