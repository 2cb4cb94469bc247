# =============================================================================
# hamspam Entry Point for `python -m hamspam`
# =============================================================================
# This module allows hamspam to be run as a Python module:
#
#   python -m hamspam --file corpus.tsv
#
# This is equivalent to running the 'hamspam' command after installation.
# =============================================================================

import sys

from hamspam.app import main

if __name__ == "__main__":
    sys.exit(main())
