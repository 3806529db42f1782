"""Allow ``python -m plainnote``."""

import sys

from plainnote.cli import main

sys.exit(main())
