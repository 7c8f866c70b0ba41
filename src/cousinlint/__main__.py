"""Allow ``python -m cousinlint``."""

from __future__ import annotations

from cousinlint.cli.main import main

raise SystemExit(main())
