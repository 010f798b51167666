"""
Base player strategy interface for the Blackjack game.

This module defines the protocol that every decision source must implement,
whether it prompts a human or decides automatically.
"""

from typing import Protocol, runtime_checkable

from ..core import Decision
from ..controller.dto import RoundSnapshot


@runtime_checkable
class PlayerStrategy(Protocol):
    """Player strategy interface protocol.

    Called once per decision during the player turn.
    """

    def decide(self, snapshot: RoundSnapshot) -> Decision:
        """Decide whether to hit or stand.

        Args:
            snapshot: Immutable snapshot of the current round

        Returns:
            Decision.HIT or Decision.STAND
        """
        ...
