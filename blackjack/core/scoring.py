"""
手牌计分模块.

点数按发牌顺序逐张累加，A的取值只取决于加入前的累计点数，已计入的A不会重新估值.
"""

from typing import TYPE_CHECKING, List

from .enums import Rank

if TYPE_CHECKING:
    from .cards import Card

BLACKJACK = 21
DEALER_STAND_TOTAL = 17
ACE_HIGH = 11
ACE_LOW = 1
FACE_VALUE = 10


def value_of(rank: Rank, current_total: int) -> int:
    """
    计算一张牌加入手牌时贡献的点数.

    Args:
        rank: 牌的点数
        current_total: 加入这张牌之前的累计点数

    Returns:
        int: 2-9为牌面值，10/J/Q/K为10，A在累计点数超过10时为1，否则为11

    Examples:
        >>> value_of(Rank.ACE, 0)
        11
        >>> value_of(Rank.ACE, 11)
        1
    """
    if rank == Rank.ACE:
        if current_total > BLACKJACK - ACE_HIGH:
            return ACE_LOW
        return ACE_HIGH
    if rank >= Rank.TEN:
        return FACE_VALUE
    return int(rank)


class Hand:
    """
    一方（庄家或玩家）的手牌.

    保存已收到的牌和累计点数，点数在每次加牌时增量计算.
    """

    def __init__(self) -> None:
        self._cards: List['Card'] = []
        self._total = 0

    def add(self, card: 'Card') -> int:
        """
        加入一张牌并更新累计点数.

        Args:
            card: 新收到的牌

        Returns:
            int: 这张牌贡献的点数
        """
        value = card.value(self._total)
        self._cards.append(card)
        self._total += value
        return value

    @property
    def cards(self) -> List['Card']:
        return list(self._cards)

    @property
    def codes(self) -> List[str]:
        return [card.code for card in self._cards]

    @property
    def total(self) -> int:
        return self._total

    @property
    def is_bust(self) -> bool:
        """累计点数超过21即爆牌"""
        return self._total > BLACKJACK

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Hand({' '.join(self.codes)}, total={self._total})"
