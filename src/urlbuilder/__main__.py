"""src/urlbuilder/__main__.py"""

import sys

from urlbuilder.cli import main

sys.exit(main())
