"""Allow ``python -m apidoc``."""

import sys

from apidoc.cli import main

sys.exit(main())
