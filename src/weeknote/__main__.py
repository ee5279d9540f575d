"""Daily Log CLI 実行用エントリポイント

Usage:
    python -m weeknote <command> [options]
"""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
