"""Allow ``python -m gb_tile_exporter``."""

import sys

from .cli import main

sys.exit(main())
