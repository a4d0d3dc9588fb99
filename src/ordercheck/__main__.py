"""Entry point for ``python -m ordercheck``."""

import sys

from ordercheck.presentation.cli import main

sys.exit(main())
