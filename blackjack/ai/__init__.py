"""
Player strategies for the Blackjack game.

This package provides the strategy protocol consumed by the round
controller and a simple automatic player.
"""

from .base import PlayerStrategy
from .simple_ai import SimpleAI, SimpleAIConfig

__all__ = ['PlayerStrategy', 'SimpleAI', 'SimpleAIConfig']
