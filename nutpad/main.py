from __future__ import annotations
import sys
from nutpad.app import run_app


def main() -> int:
    """Module entrypoint for `python -m nutpad.main`, `python -m nutpad` and the `nutpad` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
