"""python -m blackjack 入口."""

from .ui.cli import main

if __name__ == "__main__":
    main()
