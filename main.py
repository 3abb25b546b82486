# main.py

import sys

from filerepo.cli import main


if __name__ == "__main__":
    sys.exit(main())
