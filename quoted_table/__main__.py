"""Allow ``python -m quoted_table``."""

from .main import main

raise SystemExit(main())
