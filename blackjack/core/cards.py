"""
扑克牌相关的核心数据结构.

包含Card和Deck类，提供扑克牌的基本操作和牌组管理功能.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Tuple

from .enums import Rank, Suit, get_all_ranks, get_all_suits
from .exceptions import DeckExhaustedError, InvalidDeckError
from .scoring import value_of

DECK_SIZE = 52


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，按值比较相等，洗牌时只移动位置而不修改牌本身.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.JACK, Suit.SPADES)
        >>> str(card)
        'JS'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    @property
    def code(self) -> str:
        """
        返回两字符的牌代码.

        Returns:
            str: 点数字符加花色字符，如"TS"表示黑桃10
        """
        return f"{self.rank.code}{self.suit.code}"

    def to_display_str(self) -> str:
        """返回带花色符号的显示字符串，如"T♠" """
        return f"{self.rank.code}{self.suit.symbol}"

    def value(self, current_total: int) -> int:
        """
        计算这张牌加入手牌时的点数.

        Args:
            current_total: 加入前的累计点数

        Returns:
            int: 贡献的点数
        """
        return value_of(self.rank, current_total)

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"TS"或"10S"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str) or len(card_str) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        rank = Rank.from_str(rank_str)
        try:
            suit = Suit(suit_str.upper())
        except ValueError:
            raise ValueError(f"无效的花色: {suit_str}") from None
        return cls(rank, suit)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


class RandomSource(Protocol):
    """洗牌所需的随机数来源，randint的上下界均包含在内"""

    def randint(self, a: int, b: int) -> int:
        ...


class Deck:
    """
    表示一副扑克牌.

    固定保存52张牌，用游标标记下一张待发的牌。发牌只移动游标，
    洗牌时原地交换并把游标归零，因此同一副牌可以在多个回合中重复使用.

    Attributes:
        _cards: 52张牌的当前排列
        _cursor: 下一张待发牌的位置(0..52)
        _rng: 随机数生成器

    Examples:
        >>> deck = Deck(random.Random(7))
        >>> deck.shuffle()
        >>> card = deck.deal_card()
        >>> deck.cards_remaining
        51
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器，用于洗牌操作。如果为None，使用默认随机数生成器
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._cursor = 0
        self.initialize()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Optional[RandomSource] = None) -> 'Deck':
        """
        按指定顺序创建牌组.

        Args:
            cards: 完整的52张牌排列，第一张最先发出
            rng: 随机数生成器

        Returns:
            Deck: 游标为0的牌组

        Raises:
            InvalidDeckError: 当张数不是52或存在重复牌时
        """
        ordered = list(cards)
        if len(ordered) != DECK_SIZE:
            raise InvalidDeckError(f"牌组必须包含{DECK_SIZE}张牌，实际: {len(ordered)}")
        if len(set(ordered)) != DECK_SIZE:
            raise InvalidDeckError("牌组中存在重复的牌")

        deck = cls(rng)
        deck._cards = ordered
        return deck

    def initialize(self) -> None:
        """按花色优先、点数次之的标准顺序重新装满牌组，并把游标归零."""
        self._cards = [
            Card(rank, suit)
            for suit in get_all_suits()
            for rank in get_all_ranks()
        ]
        self._cursor = 0

    def shuffle(self) -> None:
        """
        洗牌.

        依次把每个位置与[0, 51]中随机选出的位置交换。交换对象取自整副牌，
        而非逐步缩小的区间，因此结果分布并不严格均匀。洗牌后游标归零.
        """
        last = len(self._cards) - 1
        for i in range(len(self._cards)):
            j = self._rng.randint(0, last)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]
        self._cursor = 0

    def deal_card(self) -> Card:
        """
        发一张牌.

        Returns:
            Card: 游标位置上的牌

        Raises:
            DeckExhaustedError: 当52张牌已全部发出时
        """
        if self._cursor >= len(self._cards):
            raise DeckExhaustedError("Cannot deal from exhausted deck")
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前完整排列（包括已发出的牌）"""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """
        获取剩余牌数.

        Returns:
            int: 游标之后尚未发出的牌数
        """
        return len(self._cards) - self._cursor

    @property
    def is_empty(self) -> bool:
        return self.cards_remaining == 0

    def peek_top(self) -> Optional[Card]:
        """
        查看下一张待发的牌但不发出.

        Returns:
            Optional[Card]: 下一张牌，如果牌组已发完则返回None
        """
        if self.is_empty:
            return None
        return self._cards[self._cursor]

    def __len__(self) -> int:
        """返回牌组中剩余的牌数."""
        return self.cards_remaining

    def __str__(self) -> str:
        return f"Deck({self.cards_remaining} cards remaining)"

    def __repr__(self) -> str:
        return f"Deck(cursor={self._cursor}, cards_remaining={self.cards_remaining})"
