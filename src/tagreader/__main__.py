"""Allow ``python -m tagreader``."""

from tagreader.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
