"""
Simple AI strategy implementation for the Blackjack game.

The AI mirrors the dealer rule: it keeps hitting until its total reaches
a fixed threshold.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core import Decision, BLACKJACK
from ..controller.dto import RoundSnapshot


@dataclass
class SimpleAIConfig:
    """Configuration for Simple AI strategy.

    Attributes:
        name: Name of the AI strategy
        stand_threshold: Stand once the player total reaches this value
    """
    name: str = "SimpleAI"
    stand_threshold: int = 17

    def __post_init__(self):
        if not 1 <= self.stand_threshold <= BLACKJACK:
            raise ValueError(f"stand_threshold must be within 1..{BLACKJACK}, got {self.stand_threshold}")


class SimpleAI:
    """Threshold-based automatic player.

    Hits while the player total is below ``stand_threshold``.
    """

    def __init__(self, config: Optional[SimpleAIConfig] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or SimpleAIConfig()
        self.decision_count = 0
        self._logger = logger or logging.getLogger(__name__)

    def decide(self, snapshot: RoundSnapshot) -> Decision:
        """Make a decision based on the current round snapshot."""
        self.decision_count += 1
        if snapshot.player_total < self.config.stand_threshold:
            decision = Decision.HIT
        else:
            decision = Decision.STAND
        self._logger.debug(
            f"{self.config.name} decides {decision} at total {snapshot.player_total}"
        )
        return decision
