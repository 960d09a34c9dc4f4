"""Allow ``python -m hguard``."""

from hguard.cli import main

raise SystemExit(main())
