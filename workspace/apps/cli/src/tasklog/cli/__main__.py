"""python -m tasklog.cli"""

import sys

from .main import main

sys.exit(main())
