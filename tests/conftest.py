"""
测试配置 - pytest配置文件

提供叠好顺序的牌组、独立事件总线和固定决策的玩家策略等通用fixture。
"""

import logging
from typing import Iterable, List

import pytest

from blackjack.core import Card, Deck, Decision, EventBus
from blackjack.controller import RoundController, RoundSnapshot


def make_stacked_deck(*codes: str) -> Deck:
    """按给定代码叠牌，剩余的牌保持标准顺序跟在后面."""
    top = [Card.from_str(code) for code in codes]
    rest = [card for card in Deck().cards if card not in top]
    return Deck.from_cards(top + rest)


class ScriptedStrategy:
    """按预设顺序返回决策的玩家策略，决策用完后一律停牌."""

    def __init__(self, decisions: Iterable[Decision] = ()):
        self._decisions: List[Decision] = list(decisions)
        self.snapshots: List[RoundSnapshot] = []

    def decide(self, snapshot: RoundSnapshot) -> Decision:
        self.snapshots.append(snapshot)
        if self._decisions:
            return self._decisions.pop(0)
        return Decision.STAND


@pytest.fixture
def stacked_deck():
    """叠牌工厂fixture"""
    return make_stacked_deck


@pytest.fixture
def scripted():
    """固定决策策略工厂fixture"""
    return ScriptedStrategy


@pytest.fixture
def event_bus():
    """每个测试独立的事件总线，避免污染全局总线"""
    return EventBus(logger=logging.getLogger("test.events"))


@pytest.fixture
def controller_for(event_bus):
    """根据叠好的牌组创建回合控制器"""
    def _create(*codes: str) -> RoundController:
        return RoundController(make_stacked_deck(*codes), event_bus=event_bus)
    return _create
