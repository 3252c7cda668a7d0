#!/usr/bin/env python3
"""
Wrapper script for running the CLI from a source checkout.
Import the actual CLI from the package structure.
"""

if __name__ == "__main__":
    import os
    import sys

    sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))
    from numdisplay.core.cli import main
    sys.exit(main())
