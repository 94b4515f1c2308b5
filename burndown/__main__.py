"""Entry point for running the tracker as a module: python -m burndown"""

import sys
from .ui import main

if __name__ == "__main__":
    sys.exit(main())
