from __future__ import annotations

from draw_poker_cli.app import main

if __name__ == "__main__":
    main()
