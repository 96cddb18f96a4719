"""Command-line entry point: ``python -m foamvis``."""
import sys

from foamvis.main import main

if __name__ == "__main__":
    sys.exit(main())
