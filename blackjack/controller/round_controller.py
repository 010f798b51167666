"""
二十一点回合控制器.

这个模块提供了单回合的主要控制逻辑，作为核心逻辑层和UI层之间的桥梁。
回合按 DEALING_INITIAL → PLAYER_TURN → DEALER_TURN → RESOLVED 推进，
玩家爆牌时从 PLAYER_TURN 直接进入 RESOLVED，庄家回合不再执行。
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Set

from ..core import (
    Deck, Hand, Phase, Decision, Recipient, Outcome, ResultReason,
    EventBus, EventType, get_event_bus,
    DeckExhaustedError, RoundStateError, DEALER_STAND_TOTAL
)
from .decorators import logged_action
from .dto import RoundSnapshot, RoundResult

if TYPE_CHECKING:
    from ..ai.base import PlayerStrategy

_ALLOWED_TRANSITIONS: Dict[Optional[Phase], Set[Phase]] = {
    None: {Phase.DEALING_INITIAL},
    Phase.DEALING_INITIAL: {Phase.PLAYER_TURN},
    Phase.PLAYER_TURN: {Phase.DEALER_TURN, Phase.RESOLVED},
    Phase.DEALER_TURN: {Phase.RESOLVED},
    Phase.RESOLVED: {Phase.DEALING_INITIAL},
}


class RoundController:
    """二十一点回合控制器.

    这个类负责：
    - 初始发牌（庄家1张，玩家2张）
    - 处理玩家的要牌/停牌决策
    - 庄家自动补牌到17点以上
    - 结算回合结果并发布事件

    牌组由调用方持有并在回合之间洗牌，控制器只负责发牌。
    控制器采用依赖注入设计，支持自定义日志记录器和事件总线。
    """

    def __init__(
        self,
        deck: Deck,
        logger: Optional[logging.Logger] = None,
        event_bus: Optional[EventBus] = None
    ):
        """初始化控制器.

        Args:
            deck: 本会话使用的牌组
            logger: 日志记录器，如果为None则创建默认记录器
            event_bus: 事件总线，如果为None则使用全局事件总线
        """
        self._deck = deck
        self._logger = logger or logging.getLogger(__name__)
        self._event_bus = event_bus or get_event_bus()
        self._phase: Optional[Phase] = None
        self._dealer = Hand()
        self._player = Hand()
        self._result: Optional[RoundResult] = None
        self._round_number = 0
        self._transition_history: List[Dict[str, Optional[Phase]]] = []

    # ==============================================
    # 回合操作
    # ==============================================

    @logged_action("Start Round")
    def start_round(self) -> RoundSnapshot:
        """开始新回合并完成初始发牌.

        Returns:
            初始发牌后的回合快照，阶段为PLAYER_TURN

        Raises:
            RoundStateError: 如果当前回合尚未结算
            DeckExhaustedError: 如果牌组在发牌过程中耗尽（回合被中止）
        """
        if self._phase not in (None, Phase.RESOLVED):
            raise RoundStateError(f"当前回合尚未结束（阶段: {self._phase.value}），无法开始新回合")

        self._dealer = Hand()
        self._player = Hand()
        self._result = None
        self._round_number += 1
        self._transition_history.clear()

        self._event_bus.emit_simple(
            EventType.ROUND_STARTED,
            source=self.__class__.__name__,
            round_number=self._round_number,
            cards_remaining=self._deck.cards_remaining
        )
        self._logger.info(f"开始第 {self._round_number} 回合")

        self._transition_to(Phase.DEALING_INITIAL)
        self._deal_to(Recipient.DEALER)
        self._deal_to(Recipient.PLAYER)
        self._deal_to(Recipient.PLAYER)
        self._transition_to(Phase.PLAYER_TURN)

        return self.get_snapshot()

    @logged_action("Player Hit")
    def hit(self) -> RoundSnapshot:
        """玩家要牌.

        玩家点数超过21时立即结算为庄家获胜。

        Returns:
            要牌后的回合快照

        Raises:
            RoundStateError: 如果当前不是玩家回合
        """
        self._require_phase(Phase.PLAYER_TURN, "要牌")

        self._deal_to(Recipient.PLAYER)
        if self._player.is_bust:
            self._logger.info(f"玩家爆牌，点数 {self._player.total}")
            self._resolve(ResultReason.PLAYER_BUST)

        return self.get_snapshot()

    @logged_action("Player Stand")
    def stand(self) -> RoundResult:
        """玩家停牌，随后庄家自动补牌并结算.

        Returns:
            回合结果

        Raises:
            RoundStateError: 如果当前不是玩家回合
        """
        self._require_phase(Phase.PLAYER_TURN, "停牌")

        self._transition_to(Phase.DEALER_TURN)
        while self._dealer.total < DEALER_STAND_TOTAL:
            self._deal_to(Recipient.DEALER)

        return self._resolve(self._compare_totals())

    def apply(self, decision: Decision) -> RoundSnapshot:
        """执行玩家决策.

        Args:
            decision: 要牌或停牌，也接受"H"/"S"代码

        Returns:
            执行后的回合快照

        Raises:
            ValueError: 如果决策无法识别
        """
        decision = Decision(decision)
        if decision == Decision.HIT:
            return self.hit()
        self.stand()
        return self.get_snapshot()

    def play_round(self, strategy: 'PlayerStrategy') -> RoundResult:
        """完整进行一回合.

        初始发牌后反复向玩家策略询问决策，直到玩家停牌或爆牌。

        Args:
            strategy: 提供要牌/停牌决策的玩家策略

        Returns:
            回合结果

        Raises:
            RoundStateError: 如果回合结束时没有结果
        """
        self.start_round()
        try:
            while self._phase == Phase.PLAYER_TURN:
                decision = strategy.decide(self.get_snapshot())
                self._logger.debug(f"玩家决策: {decision}")
                self.apply(decision)
        except Exception as e:
            # 牌组耗尽时回合已被中止
            if self._phase is not None:
                self._abort_round(f"玩家决策失败: {e}")
            raise

        if self._result is None:
            raise RoundStateError(f"第 {self._round_number} 回合结束但没有结果")
        return self._result

    # ==============================================
    # 状态查询
    # ==============================================

    def get_snapshot(self) -> RoundSnapshot:
        """获取当前回合状态的快照.

        Raises:
            RoundStateError: 如果还没有开始任何回合
        """
        if self._phase is None:
            raise RoundStateError("当前没有进行中的回合")

        return RoundSnapshot(
            phase=self._phase,
            dealer_cards=self._dealer.codes,
            player_cards=self._player.codes,
            dealer_total=self._dealer.total,
            player_total=self._player.total,
            cards_remaining=self._deck.cards_remaining
        )

    @property
    def phase(self) -> Optional[Phase]:
        return self._phase

    @property
    def result(self) -> Optional[RoundResult]:
        """最近一回合的结果，回合未结算时为None"""
        return self._result

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def transition_history(self) -> List[Dict[str, Optional[Phase]]]:
        """当前回合的阶段转换历史"""
        return list(self._transition_history)

    # ==============================================
    # 内部方法
    # ==============================================

    def _require_phase(self, phase: Phase, operation: str) -> None:
        if self._phase != phase:
            current = self._phase.value if self._phase else "none"
            raise RoundStateError(f"当前阶段({current})不允许{operation}")

    def _transition_to(self, target: Phase) -> None:
        if target not in _ALLOWED_TRANSITIONS[self._phase]:
            raise RoundStateError(f"不能从 {self._phase} 转换到 {target}")

        old_phase = self._phase
        self._phase = target
        self._transition_history.append({'from': old_phase, 'to': target})

        self._event_bus.emit_simple(
            EventType.PHASE_CHANGED,
            source=self.__class__.__name__,
            old_phase=old_phase.value if old_phase else None,
            new_phase=target.value
        )
        self._logger.debug(f"阶段转换: {old_phase} -> {target}")

    def _deal_to(self, recipient: Recipient) -> None:
        """从牌组发一张牌给指定一方，牌组耗尽时中止回合."""
        try:
            card = self._deck.deal_card()
        except DeckExhaustedError:
            self._abort_round("牌组已耗尽")
            raise

        hand = self._dealer if recipient == Recipient.DEALER else self._player
        value = hand.add(card)

        self._event_bus.emit_simple(
            EventType.CARD_DEALT,
            source=self.__class__.__name__,
            recipient=recipient.value,
            card=card.code,
            value=value,
            dealer_total=self._dealer.total,
            player_total=self._player.total,
            phase=self._phase.value if self._phase else None
        )
        self._logger.debug(f"{recipient.value} 收到 {card.code} (+{value})")

    def _abort_round(self, reason: str) -> None:
        self._logger.error(
            f"第 {self._round_number} 回合中止: {reason} "
            f"(庄家 {self._dealer.total}, 玩家 {self._player.total})"
        )
        self._event_bus.emit_simple(
            EventType.ROUND_ABORTED,
            source=self.__class__.__name__,
            round_number=self._round_number,
            reason=reason
        )
        self._phase = None
        self._result = None

    def _compare_totals(self) -> ResultReason:
        """庄家回合结束后比较点数，平局判玩家胜."""
        if self._dealer.is_bust:
            return ResultReason.DEALER_BUST
        if self._player.total > self._dealer.total:
            return ResultReason.PLAYER_HIGHER
        if self._player.total == self._dealer.total:
            return ResultReason.TIE
        return ResultReason.DEALER_HIGHER

    def _resolve(self, reason: ResultReason) -> RoundResult:
        self._transition_to(Phase.RESOLVED)

        result = RoundResult(
            outcome=reason.outcome,
            reason=reason,
            player_total=self._player.total,
            dealer_total=self._dealer.total,
            player_cards=self._player.codes,
            dealer_cards=self._dealer.codes,
            round_number=self._round_number
        )
        self._result = result

        self._event_bus.emit_simple(
            EventType.ROUND_ENDED,
            source=self.__class__.__name__,
            result=result,
            outcome=result.outcome.value,
            reason=result.reason.value,
            player_total=result.player_total,
            dealer_total=result.dealer_total
        )
        winner = "玩家" if result.outcome == Outcome.PLAYER_WIN else "庄家"
        self._logger.info(
            f"第 {self._round_number} 回合结束: {winner}获胜 ({reason.value}), "
            f"庄家 {result.dealer_total} / 玩家 {result.player_total}"
        )
        return result
