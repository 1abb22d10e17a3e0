#!/usr/bin/env python3
"""Entry point for the terminal trivia game (runs without installing the package)."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from trivia_game.menu import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
