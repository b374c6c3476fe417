# main.py - game entry point

import sys

from adventurers.start import main

if __name__ == "__main__":
    sys.exit(main())
