"""Entry point for running the CLI via: python3 -m svcs <command>"""

from __future__ import annotations

import sys

from .app.cli import main


if __name__ == "__main__":
    sys.exit(main())
