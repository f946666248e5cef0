import sys
from vortex_cursor.cli import main

if __name__ == "__main__":
    sys.exit(main())
