"""Allow ``python -m coverfit``."""

import sys

from coverfit.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
