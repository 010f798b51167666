"""
Controller layer for the Blackjack game.

This package provides the round controller that bridges the core
game logic with the user interface layers.
"""

from .round_controller import RoundController
from .dto import (
    RoundSnapshot, RoundResult, SessionStats, GameConfiguration, LOG_LEVELS
)
from .decorators import logged_action

__all__ = [
    'RoundController',
    'RoundSnapshot', 'RoundResult', 'SessionStats', 'GameConfiguration', 'LOG_LEVELS',
    'logged_action'
]
