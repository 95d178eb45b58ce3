"""Run the finder as a script."""

import sys

from .cli import main

sys.exit(main())
