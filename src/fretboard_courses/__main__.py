"""Allow running as ``python -m fretboard_courses``."""

import sys

from fretboard_courses.cli import main

sys.exit(main())
