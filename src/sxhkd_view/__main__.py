#!/usr/bin/env python3
"""Entry point for running sxhkd-view as a module: python -m sxhkd_view"""

import sys

from sxhkd_view.main import main

if __name__ == "__main__":
    sys.exit(main())
