from __future__ import annotations

import sys

from foldertree.main import main

sys.exit(main())
