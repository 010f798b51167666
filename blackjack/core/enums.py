"""
游戏相关枚举定义模块.

包含二十一点游戏中使用的所有枚举类型，如花色、点数、回合阶段、玩家决策和回合结果等.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    枚举顺序即新牌组的排列顺序（梅花、方块、红桃、黑桃）.
    """

    CLUBS = "C"       # 梅花
    DIAMONDS = "D"    # 方块
    HEARTS = "H"      # 红桃
    SPADES = "S"      # 黑桃

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        """返回花色的单字符代码"""
        return self.value

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数，按从小到大排列，A最大.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.code

    @property
    def code(self) -> str:
        """
        返回点数的单字符代码.

        Returns:
            str: 2-9为数字，10为"T"，J/Q/K/A为首字母
        """
        if self.value <= 9:
            return str(self.value)
        return {
            10: "T",
            11: "J",
            12: "Q",
            13: "K",
            14: "A",
        }[self.value]

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        从字符串创建Rank对象.

        Args:
            rank_str: 点数字符串，如"7"、"T"、"10"、"a"

        Raises:
            ValueError: 当字符串无法识别时
        """
        rank_str = rank_str.upper()
        if rank_str == "10":
            return cls.TEN
        for rank in cls:
            if rank.code == rank_str:
                return rank
        raise ValueError(f"无效的点数: {rank_str}")


class Phase(Enum):
    """回合阶段枚举"""

    DEALING_INITIAL = "dealing_initial"  # 初始发牌
    PLAYER_TURN = "player_turn"          # 玩家回合
    DEALER_TURN = "dealer_turn"          # 庄家回合
    RESOLVED = "resolved"                # 已结算


class Decision(Enum):
    """玩家决策枚举"""

    HIT = "H"      # 要牌
    STAND = "S"    # 停牌

    def __str__(self) -> str:
        return self.name.lower()


class Recipient(Enum):
    """收牌方"""

    DEALER = "dealer"
    PLAYER = "player"


class Outcome(Enum):
    """回合结果"""

    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"


class ResultReason(Enum):
    """
    回合结果原因.

    区分爆牌结算和比点结算，平局判玩家胜.
    """

    PLAYER_BUST = "player_bust"        # 玩家爆牌
    DEALER_BUST = "dealer_bust"        # 庄家爆牌
    PLAYER_HIGHER = "player_higher"    # 玩家点数更高
    TIE = "tie"                        # 平局，玩家胜
    DEALER_HIGHER = "dealer_higher"    # 庄家点数更高

    @property
    def outcome(self) -> Outcome:
        """返回该原因对应的回合结果"""
        if self in (ResultReason.PLAYER_BUST, ResultReason.DEALER_HIGHER):
            return Outcome.DEALER_WIN
        return Outcome.PLAYER_WIN


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按牌组排列顺序的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从2到A的13种点数
    """
    return list(Rank)
