from __future__ import annotations

from actions_toolkit.main import main

if __name__ == "__main__":
    raise SystemExit(main())
