"""Allow ``python -m mobs``."""

from mobs.cli.main import main

raise SystemExit(main())
