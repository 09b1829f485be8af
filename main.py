# main.py

import sys

from othello.cli import main


if __name__ == "__main__":
    sys.exit(main())
