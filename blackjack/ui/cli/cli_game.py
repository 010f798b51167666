"""二十一点CLI游戏界面.

这个模块提供命令行界面的会话循环：同一副牌在整个会话中重复使用，
每回合开始前洗牌，回合结束后询问是否再玩一局。
"""

import logging
import random
import time
from typing import Optional

import click

from ...core import Deck, EventBus, EventType, GameEvent, Phase, BlackjackError
from ...controller import (
    RoundController, RoundResult, SessionStats, GameConfiguration, LOG_LEVELS
)
from ...ai import PlayerStrategy, SimpleAI, SimpleAIConfig
from .render import CLIRenderer
from .input_handler import CLIInputHandler, HumanPlayer


def setup_logging(level: str = "WARNING") -> None:
    """程序启动时调用一次，配置根日志记录器."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


class BlackjackCLI:
    """二十一点CLI游戏界面.

    负责持有牌组和随机数生成器、驱动回合控制器，并把回合事件渲染到终端。
    """

    def __init__(
        self,
        config: Optional[GameConfiguration] = None,
        strategy: Optional[PlayerStrategy] = None,
        logger: Optional[logging.Logger] = None
    ):
        """初始化CLI游戏.

        Args:
            config: 游戏配置，如果为None则使用默认配置
            strategy: 玩家策略，如果为None则按配置选择人类玩家或AI
            logger: 日志记录器
        """
        self.config = config or GameConfiguration()
        self._logger = logger or logging.getLogger(__name__)

        # 每个进程只播种一次
        self.seed = self.config.seed if self.config.seed is not None else int(time.time())
        self._logger.info(f"随机种子: {self.seed}")
        self.deck = Deck(random.Random(self.seed))

        self.event_bus = EventBus(logger=self._logger)
        self.controller = RoundController(self.deck, logger=self._logger, event_bus=self.event_bus)
        self.strategy = strategy or self._default_strategy()
        self.stats = SessionStats()

        self.event_bus.subscribe(EventType.ROUND_STARTED, self._on_round_started)
        self.event_bus.subscribe(EventType.CARD_DEALT, self._on_card_dealt)
        self.event_bus.subscribe(EventType.PHASE_CHANGED, self._on_phase_changed)

    def _default_strategy(self) -> PlayerStrategy:
        if self.config.auto_play:
            return SimpleAI(SimpleAIConfig(stand_threshold=self.config.auto_threshold))
        return HumanPlayer()

    # ==============================================
    # 事件渲染
    # ==============================================

    def _on_round_started(self, event: GameEvent) -> None:
        click.echo(CLIRenderer.render_round_header(event.data["round_number"]))

    def _on_card_dealt(self, event: GameEvent) -> None:
        click.echo(CLIRenderer.render_card_dealt(event.data))

    def _on_phase_changed(self, event: GameEvent) -> None:
        if event.data["new_phase"] == Phase.DEALER_TURN.value:
            click.echo(CLIRenderer.render_dealer_turn())

    # ==============================================
    # 会话循环
    # ==============================================

    def play_one_round(self) -> RoundResult:
        """洗牌并完整进行一回合，输出结果."""
        self.deck.shuffle()
        result = self.controller.play_round(self.strategy)
        self.stats.record(result)
        click.echo(CLIRenderer.render_result(result))
        return result

    def _should_continue(self) -> bool:
        max_rounds = self.config.max_rounds
        if max_rounds is not None and self.stats.rounds_played >= max_rounds:
            return False
        if self.config.auto_play and max_rounds is not None:
            return True
        return CLIInputHandler.get_replay_choice()

    def run(self) -> SessionStats:
        """运行游戏主循环.

        Returns:
            本次会话的统计信息
        """
        while True:
            if self.config.show_instructions:
                click.echo(CLIRenderer.render_instructions())

            self.play_one_round()

            if not self._should_continue():
                break

        click.echo(CLIRenderer.render_session_summary(self.stats))
        self._logger.info(
            f"会话结束: {self.stats.rounds_played} 回合, 玩家胜 {self.stats.player_wins}"
        )
        return self.stats


@click.command()
@click.option("--seed", type=click.IntRange(min=0), default=None,
              help="随机种子，用于复现洗牌结果（默认按当前时间）")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default="WARNING", show_default=True, envvar="BLACKJACK_LOG_LEVEL",
              help="日志级别")
@click.option("--no-instructions", is_flag=True, help="不显示游戏说明")
@click.option("--auto", "auto_play", is_flag=True, help="由AI代替玩家决策")
@click.option("--auto-threshold", type=int, default=17, show_default=True,
              help="AI停牌点数 (12-21)")
@click.option("--rounds", "max_rounds", type=int, default=None,
              help="最多进行的回合数，到达后直接退出；自动模式下回合之间不再询问")
def main(seed, log_level, no_instructions, auto_play, auto_threshold, max_rounds):
    """单人控制台二十一点."""
    try:
        config = GameConfiguration.create(
            seed=seed,
            log_level=log_level,
            show_instructions=not no_instructions,
            auto_play=auto_play,
            auto_threshold=auto_threshold,
            max_rounds=max_rounds,
        )
    except BlackjackError as e:
        raise click.UsageError(str(e))

    setup_logging(config.log_level)

    try:
        BlackjackCLI(config).run()
    except BlackjackError as e:
        raise click.ClickException(f"游戏出错: {e}")


if __name__ == "__main__":
    main()
