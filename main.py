import sys

from linalg_calc.report import main

if __name__ == "__main__":
    sys.exit(main())
