"""DTO和游戏配置单元测试.

测试pydantic数据传输对象的校验规则和便捷属性。
"""

import pytest
from pydantic import ValidationError

from blackjack.controller import (
    GameConfiguration, RoundResult, RoundSnapshot, SessionStats
)
from blackjack.core import GameConfigError, Outcome, Phase, ResultReason


def _result(reason: ResultReason, player_total: int = 20, dealer_total: int = 19) -> RoundResult:
    return RoundResult(
        outcome=reason.outcome,
        reason=reason,
        player_total=player_total,
        dealer_total=dealer_total,
    )


@pytest.mark.unit
@pytest.mark.fast
class TestRoundSnapshot:

    def test_defaults(self):
        snapshot = RoundSnapshot(phase=Phase.PLAYER_TURN)
        assert snapshot.dealer_cards == []
        assert snapshot.cards_remaining == 52
        assert not snapshot.is_player_bust

    def test_bust_flag(self):
        snapshot = RoundSnapshot(phase=Phase.RESOLVED, player_total=22)
        assert snapshot.is_player_bust

    def test_rejects_negative_total(self):
        with pytest.raises(ValidationError):
            RoundSnapshot(phase=Phase.PLAYER_TURN, player_total=-1)


@pytest.mark.unit
@pytest.mark.fast
class TestRoundResult:

    @pytest.mark.parametrize("reason,won", [
        (ResultReason.PLAYER_BUST, False),
        (ResultReason.DEALER_BUST, True),
        (ResultReason.PLAYER_HIGHER, True),
        (ResultReason.TIE, True),
        (ResultReason.DEALER_HIGHER, False),
    ])
    def test_reason_maps_to_outcome(self, reason, won):
        result = _result(reason)
        assert result.player_won is won
        assert result.outcome == (Outcome.PLAYER_WIN if won else Outcome.DEALER_WIN)

    def test_round_number_must_be_positive(self):
        with pytest.raises(ValidationError):
            RoundResult(outcome=Outcome.PLAYER_WIN, reason=ResultReason.TIE,
                        player_total=18, dealer_total=18, round_number=0)


@pytest.mark.unit
@pytest.mark.fast
class TestSessionStats:

    def test_record(self):
        stats = SessionStats()
        stats.record(_result(ResultReason.TIE))
        stats.record(_result(ResultReason.PLAYER_BUST))
        stats.record(_result(ResultReason.DEALER_BUST))

        assert stats.rounds_played == 3
        assert stats.player_wins == 2
        assert stats.dealer_wins == 1


@pytest.mark.unit
@pytest.mark.fast
class TestGameConfiguration:

    def test_defaults(self):
        config = GameConfiguration()
        assert config.seed is None
        assert config.log_level == "WARNING"
        assert config.show_instructions is True
        assert config.auto_play is False
        assert config.auto_threshold == 17
        assert config.max_rounds is None

    def test_log_level_is_normalized(self):
        assert GameConfiguration.create(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [
        {"log_level": "verbose"},
        {"auto_threshold": 11},
        {"auto_threshold": 22},
        {"seed": -1},
        {"max_rounds": 0},
    ])
    def test_invalid_values_raise_config_error(self, kwargs):
        with pytest.raises(GameConfigError):
            GameConfiguration.create(**kwargs)
