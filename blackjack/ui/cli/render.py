"""二十一点CLI渲染模块.

这个模块负责将回合事件和结果渲染为命令行文本，
实现显示逻辑与核心游戏逻辑的分离。
"""

from typing import Any, Dict, List

from ...core import Card, Recipient, ResultReason
from ...controller import RoundResult, SessionStats

_RECIPIENT_NAMES = {
    Recipient.DEALER.value: "庄家",
    Recipient.PLAYER.value: "玩家",
}

_REASON_TEXT = {
    ResultReason.PLAYER_BUST: "你的点数超过了21！",
    ResultReason.DEALER_BUST: "庄家的点数超过了21！",
    ResultReason.PLAYER_HIGHER: "你的点数比庄家高。",
    ResultReason.TIE: "点数相同，平局判玩家胜。",
    ResultReason.DEALER_HIGHER: "庄家的点数比你高。",
}


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的数据。
    """

    @staticmethod
    def render_card(code: str) -> str:
        """渲染一张牌：代码加花色符号，如"TS(T♠)"."""
        return f"{code}({Card.from_str(code).to_display_str()})"

    @staticmethod
    def render_hand(codes: List[str]) -> str:
        return " ".join(CLIRenderer.render_card(code) for code in codes)

    @staticmethod
    def render_instructions() -> str:
        """渲染游戏标题和说明."""
        lines = [
            "",
            f"{'BLACKJACK':^40}",
            f"{'=========':^40}",
            "",
            "* 说明",
            "  ----",
            "1. 用键盘输入你的操作。",
            "2. 每张牌用两个字符表示：一个点数，一个花色。",
            "   例如 JS 表示黑桃J，5H 表示红桃5，TD 表示方块10。",
            "3. 你需要了解二十一点的基本规则。",
            "4. 为简单起见，平局判玩家胜。",
            "",
            "那么，开始吧！",
        ]
        return "\n".join(lines)

    @staticmethod
    def render_round_header(round_number: int) -> str:
        return f"\n=== 第 {round_number} 回合 ===\n发牌中..."

    @staticmethod
    def render_scores(dealer_total: int, player_total: int) -> str:
        """渲染双方当前点数."""
        return f"当前点数  庄家: {dealer_total}\t玩家: {player_total}"

    @staticmethod
    def render_card_dealt(data: Dict[str, Any]) -> str:
        """渲染一次发牌事件.

        Args:
            data: CARD_DEALT事件数据，包含recipient、card以及双方累计点数

        Returns:
            格式化的发牌信息，包括发牌后的双方点数
        """
        name = _RECIPIENT_NAMES.get(data["recipient"], data["recipient"])
        return (
            f"{name}: {CLIRenderer.render_card(data['card'])}  (+{data['value']})\t"
            f"{CLIRenderer.render_scores(data['dealer_total'], data['player_total'])}"
        )

    @staticmethod
    def render_dealer_turn() -> str:
        return "\n庄家补牌中..."

    @staticmethod
    def render_result(result: RoundResult) -> str:
        """渲染回合结果.

        Args:
            result: 回合结果

        Returns:
            格式化的结果字符串
        """
        lines = [
            "",
            f"庄家: {CLIRenderer.render_hand(result.dealer_cards)} = {result.dealer_total}",
            f"玩家: {CLIRenderer.render_hand(result.player_cards)} = {result.player_total}",
            _REASON_TEXT[result.reason],
        ]
        if result.player_won:
            lines.append("### 你赢了！ \\o/ ###")
        else:
            lines.append("### 你输了！下次好运... ###")
        return "\n".join(lines)

    @staticmethod
    def render_session_summary(stats: SessionStats) -> str:
        """渲染会话统计."""
        return (
            f"\n共进行 {stats.rounds_played} 回合，"
            f"玩家胜 {stats.player_wins} 次，庄家胜 {stats.dealer_wins} 次。\n感谢游戏！"
        )
