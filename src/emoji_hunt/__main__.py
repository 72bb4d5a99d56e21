"""Allow ``python -m emoji_hunt``."""

import sys

from .cli import main

sys.exit(main())
