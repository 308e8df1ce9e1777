"""
Launcher: `python app/app.py`. All UI glue lives in questgen.cli.
"""

import sys

from questgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
