"""数据传输对象定义.

这个模块定义了控制器与UI层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性。
牌一律以两字符代码传递，如"TS"。
"""

from typing import Optional, List

from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field, ValidationError, field_validator

from ..core import Phase, Outcome, ResultReason, GameConfigError, BLACKJACK, DECK_SIZE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@pydantic_dataclass
class RoundSnapshot:
    """回合状态快照.

    包含回合在某个时刻的完整状态信息，用于UI显示和玩家策略决策。
    """
    phase: Phase = Field(..., description="当前回合阶段")
    dealer_cards: List[str] = Field(default_factory=list, description="庄家的牌")
    player_cards: List[str] = Field(default_factory=list, description="玩家的牌")
    dealer_total: int = Field(0, ge=0, description="庄家累计点数")
    player_total: int = Field(0, ge=0, description="玩家累计点数")
    cards_remaining: int = Field(DECK_SIZE, ge=0, le=DECK_SIZE, description="牌组剩余牌数")

    @property
    def is_player_bust(self) -> bool:
        return self.player_total > BLACKJACK


@pydantic_dataclass
class RoundResult:
    """回合结束结果.

    包含一回合结束后的完整结果信息。
    """
    outcome: Outcome = Field(..., description="回合结果")
    reason: ResultReason = Field(..., description="结果原因")
    player_total: int = Field(..., ge=0, description="玩家最终点数")
    dealer_total: int = Field(..., ge=0, description="庄家最终点数")
    player_cards: List[str] = Field(default_factory=list, description="玩家最终手牌")
    dealer_cards: List[str] = Field(default_factory=list, description="庄家最终手牌")
    round_number: int = Field(1, ge=1, description="回合编号")

    @property
    def player_won(self) -> bool:
        return self.outcome == Outcome.PLAYER_WIN


@pydantic_dataclass
class SessionStats:
    """本次会话的统计信息（仅保存在内存中）."""
    rounds_played: int = Field(0, ge=0, description="已完成回合数")
    player_wins: int = Field(0, ge=0, description="玩家获胜次数")
    dealer_wins: int = Field(0, ge=0, description="庄家获胜次数")

    def record(self, result: RoundResult) -> None:
        """记录一回合的结果."""
        self.rounds_played += 1
        if result.player_won:
            self.player_wins += 1
        else:
            self.dealer_wins += 1


@pydantic_dataclass
class GameConfiguration:
    """游戏配置.

    包含会话的基本配置参数。规则常数（21点、庄家17点停牌）不可配置。
    """
    seed: Optional[int] = Field(None, ge=0, description="随机种子，None表示按当前时间播种")
    log_level: str = Field("WARNING", description="日志级别")
    show_instructions: bool = Field(True, description="是否在每回合开始前显示说明")
    auto_play: bool = Field(False, description="是否由AI代替玩家决策")
    auto_threshold: int = Field(17, ge=12, le=21, description="AI停牌点数")
    max_rounds: Optional[int] = Field(None, ge=1, description="会话回合上限，None表示不限")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别并统一为大写."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {v}，可选: {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def create(cls, **kwargs) -> 'GameConfiguration':
        """创建配置，验证失败时抛出GameConfigError.

        Raises:
            GameConfigError: 当任一配置项无效时
        """
        try:
            return cls(**kwargs)
        except ValidationError as e:
            raise GameConfigError(f"游戏配置无效: {e}") from e
