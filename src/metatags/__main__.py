"""Allows: python -m metatags"""

import sys

from .cli import main

sys.exit(main())
