"""Allow running as ``python -m human_time``."""

import sys

from human_time.cli.cli import main

sys.exit(main())
