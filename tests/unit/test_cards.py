"""
blackjack/core/cards.py 的单元测试。

测试Card和Deck类的基本功能。
"""

import random

import pytest

from blackjack.core import (
    Card, Deck, Suit, Rank, DECK_SIZE, DeckExhaustedError, InvalidDeckError, new_deck
)


class SequenceRandom:
    """按预设序列返回randint结果的随机数来源。"""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.mark.unit
@pytest.mark.fast
class TestCard:
    """测试Card类的功能。"""

    def test_card_creation(self):
        """测试Card对象的创建。"""
        card = Card(Rank.ACE, Suit.HEARTS)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS

    def test_card_code(self):
        """测试两字符牌代码。"""
        assert Card(Rank.JACK, Suit.SPADES).code == "JS"
        assert Card(Rank.TEN, Suit.DIAMONDS).code == "TD"
        assert Card(Rank.TWO, Suit.CLUBS).code == "2C"
        assert Card(Rank.ACE, Suit.HEARTS).code == "AH"
        assert str(Card(Rank.KING, Suit.CLUBS)) == "KC"

    def test_every_code_is_two_characters(self):
        """测试所有52张牌的代码都是两个字符且互不相同。"""
        codes = [card.code for card in Deck().cards]
        assert all(len(code) == 2 for code in codes)
        assert len(set(codes)) == DECK_SIZE

    def test_card_repr(self):
        """测试Card的详细表示。"""
        assert repr(Card(Rank.QUEEN, Suit.DIAMONDS)) == "Card(QUEEN, DIAMONDS)"

    def test_display_string_uses_symbol(self):
        assert Card(Rank.TEN, Suit.SPADES).to_display_str() == "T♠"

    def test_card_equality_and_hash(self):
        """测试Card按值相等，可用作集合元素。"""
        card1 = Card(Rank.JACK, Suit.CLUBS)
        card2 = Card(Rank.JACK, Suit.CLUBS)
        card3 = Card(Rank.JACK, Suit.HEARTS)

        assert card1 == card2
        assert card1 != card3
        assert hash(card1) == hash(card2)
        assert len({card1, card2, card3}) == 2

    def test_card_immutable(self):
        """测试Card是不可变的。"""
        card = Card(Rank.ACE, Suit.HEARTS)
        with pytest.raises(AttributeError):
            card.suit = Suit.SPADES

    def test_card_rejects_wrong_types(self):
        with pytest.raises(TypeError):
            Card(14, Suit.HEARTS)
        with pytest.raises(TypeError):
            Card(Rank.ACE, "H")

    @pytest.mark.parametrize("text,expected", [
        ("TS", Card(Rank.TEN, Suit.SPADES)),
        ("10s", Card(Rank.TEN, Suit.SPADES)),
        ("ah", Card(Rank.ACE, Suit.HEARTS)),
        ("7C", Card(Rank.SEVEN, Suit.CLUBS)),
    ])
    def test_from_str(self, text, expected):
        """测试从字符串解析牌。"""
        assert Card.from_str(text) == expected

    @pytest.mark.parametrize("text", ["", "A", "1S", "AX", "ZZ"])
    def test_from_str_invalid(self, text):
        with pytest.raises(ValueError):
            Card.from_str(text)

    def test_card_value_delegates_to_running_total(self):
        ace = Card(Rank.ACE, Suit.SPADES)
        assert ace.value(0) == 11
        assert ace.value(11) == 1


@pytest.mark.unit
@pytest.mark.fast
class TestDeck:
    """测试Deck类的功能。"""

    def test_deck_canonical_order(self):
        """测试新牌组按花色优先、点数次之排列。"""
        deck = Deck()
        cards = deck.cards

        assert len(cards) == DECK_SIZE
        assert cards[0] == Card(Rank.TWO, Suit.CLUBS)
        assert cards[12] == Card(Rank.ACE, Suit.CLUBS)
        assert cards[13] == Card(Rank.TWO, Suit.DIAMONDS)
        assert cards[-1] == Card(Rank.ACE, Suit.SPADES)
        assert deck.cursor == 0

    def test_deck_contains_all_cards(self):
        """测试Deck包含所有52张牌且无重复。"""
        expected = {Card(rank, suit) for suit in Suit for rank in Rank}
        assert set(Deck().cards) == expected

    def test_deal_advances_cursor(self):
        deck = Deck()
        card = deck.deal_card()

        assert card == Card(Rank.TWO, Suit.CLUBS)
        assert deck.cursor == 1
        assert deck.cards_remaining == 51
        assert len(deck) == 51
        # 发牌不会移除牌，只移动游标
        assert len(deck.cards) == DECK_SIZE

    def test_deal_all_then_exhausted(self):
        """测试连续发52张牌后第53次发牌失败。"""
        deck = Deck(random.Random(1))
        deck.shuffle()

        dealt = [deck.deal_card() for _ in range(DECK_SIZE)]

        assert len(set(dealt)) == DECK_SIZE
        assert deck.is_empty
        assert deck.peek_top() is None
        with pytest.raises(DeckExhaustedError):
            deck.deal_card()
        # 仍可作为IndexError捕获
        with pytest.raises(IndexError):
            deck.deal_card()
        assert deck.cursor == DECK_SIZE

    def test_shuffle_is_permutation_and_resets_cursor(self):
        """测试洗牌只改变顺序且游标归零。"""
        deck = Deck(random.Random(42))
        for _ in range(10):
            deck.deal_card()

        deck.shuffle()

        assert deck.cursor == 0
        assert sorted(deck.cards, key=repr) == sorted(Deck().cards, key=repr)
        assert deck.cards != Deck().cards

    def test_shuffle_swaps_with_full_range_partner(self):
        """测试每个位置都与[0, 51]中的随机位置交换。"""
        rng = SequenceRandom([51] + [i for i in range(1, DECK_SIZE)])
        deck = Deck(rng)
        canonical = Deck().cards

        deck.shuffle()

        assert rng.calls == [(0, 51)] * DECK_SIZE
        # 第0张与第51张交换，其余位置与自身交换
        assert deck.cards[0] == canonical[51]
        assert deck.cards[51] == canonical[0]
        assert deck.cards[1:51] == canonical[1:51]

    def test_same_seed_same_order(self):
        deck1 = Deck(random.Random(123))
        deck2 = Deck(random.Random(123))
        deck1.shuffle()
        deck2.shuffle()
        assert deck1.cards == deck2.cards

    def test_initialize_restores_canonical_order(self):
        deck = Deck(random.Random(9))
        deck.shuffle()
        deck.deal_card()

        deck.initialize()

        assert deck.cards == Deck().cards
        assert deck.cursor == 0

    def test_peek_top_does_not_deal(self):
        deck = Deck()
        top = deck.peek_top()
        assert deck.cursor == 0
        assert deck.deal_card() == top

    def test_from_cards_keeps_order(self, stacked_deck):
        deck = stacked_deck("AS", "KH")
        assert deck.deal_card() == Card(Rank.ACE, Suit.SPADES)
        assert deck.deal_card() == Card(Rank.KING, Suit.HEARTS)
        assert deck.deal_card() == Card(Rank.TWO, Suit.CLUBS)

    def test_from_cards_rejects_wrong_size(self):
        with pytest.raises(InvalidDeckError):
            Deck.from_cards(Deck().cards[:51])

    def test_from_cards_rejects_duplicates(self):
        cards = list(Deck().cards)
        cards[1] = cards[0]
        with pytest.raises(InvalidDeckError, match="重复"):
            Deck.from_cards(cards)

    def test_new_deck_helper(self):
        assert new_deck(shuffle=False).cards == Deck().cards
        assert new_deck(seed=5).cards == new_deck(seed=5).cards
