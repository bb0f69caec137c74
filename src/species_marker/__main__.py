"""Allow ``python -m species_marker``."""

import sys

from species_marker.cli import main

sys.exit(main())
