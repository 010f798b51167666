"""二十一点CLI输入处理模块.

这个模块负责处理用户输入，使用click的Choice类型做强校验：
非法输入会被拒绝并重新提示，不会作为错误向上抛出。
"""

import click

from ...core import Decision
from ...controller import RoundSnapshot

DECISION_CHOICES = click.Choice([d.value for d in Decision], case_sensitive=False)
REPLAY_CHOICES = click.Choice(["Y", "N"], case_sensitive=False)


class CLIInputHandler:
    """CLI输入处理器.

    负责处理用户输入，提供强校验和错误处理。
    """

    @staticmethod
    def get_decision() -> Decision:
        """获取玩家的要牌/停牌决策.

        Returns:
            Decision.HIT 或 Decision.STAND

        Raises:
            click.Abort: 用户取消输入（Ctrl-C或输入结束）
        """
        choice = click.prompt("请输入你的操作: 要牌(H) 或 停牌(S)", type=DECISION_CHOICES)
        return Decision(choice.upper())

    @staticmethod
    def get_replay_choice() -> bool:
        """获取是否再玩一局的选择.

        Returns:
            True表示继续，False表示退出；输入结束视为退出
        """
        try:
            choice = click.prompt("\n还有时间再玩一局吗?", type=REPLAY_CHOICES)
        except click.Abort:
            return False
        return choice.upper() == "Y"


class HumanPlayer:
    """通过命令行提示做决策的玩家策略."""

    def decide(self, snapshot: RoundSnapshot) -> Decision:
        return CLIInputHandler.get_decision()
