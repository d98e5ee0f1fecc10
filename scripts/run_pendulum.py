import sys

from doublependulum.cli import main

if __name__ == "__main__":
    sys.exit(main())
