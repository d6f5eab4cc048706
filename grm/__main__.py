"""Allow ``python -m grm``."""

import sys

from grm.main import main

sys.exit(main())
