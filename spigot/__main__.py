# spigot/__main__.py
"""Allow ``python -m spigot``."""

import sys

from .main import main

sys.exit(main())
