"""Unit tests for ledger models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.ledger import Earning, LedgerView, Player, ViewMode


class TestPlayer:
    """Tests for the Player record."""

    def test_with_earning_returns_new_player(self):
        player = Player(name='Alice')
        updated = player.with_earning(25.0, '2026/10/19')

        assert player.earnings == ()
        assert player.total_earnings == 0
        assert updated.name == 'Alice'
        assert updated.total_earnings == 25
        assert updated.earnings[0] == Earning(match='Ticket 1', amount=25.0, total=25.0, date='2026/10/19')

    def test_ticket_numbers_follow_length(self):
        player = Player(name='Alice')
        for _ in range(3):
            player = player.with_earning(1.0, '2026/10/19')
        assert player.next_ticket() == 'Ticket 4'

    def test_is_frozen(self):
        player = Player(name='Alice')
        with pytest.raises(PydanticValidationError):
            player.total_earnings = 100.0

    def test_key_is_case_insensitive(self):
        assert Player(name='Alice').key == Player(name='ALICE').key
        assert Player.key_for('  alice ') == 'alice'

    def test_earning_for(self):
        player = Player(name='Alice').with_earning(3.0, 'd').with_earning(4.0, 'd')
        assert player.earning_for('Ticket 2').total == 7
        assert player.earning_for('Ticket 3') is None

    def test_recent_earnings_newest_first(self):
        player = Player(name='Alice').with_earning(3.0, 'd').with_earning(-1.0, 'd')
        assert [e.match for e in player.recent_earnings()] == ['Ticket 2', 'Ticket 1']

    def test_is_profitable(self):
        assert not Player(name='Alice').is_profitable
        assert Player(name='Alice').with_earning(0.01, 'd').is_profitable
        assert not Player(name='Alice').with_earning(-1.0, 'd').is_profitable

    def test_empty_name_rejected(self):
        with pytest.raises(PydanticValidationError):
            Player(name='')


class TestEarning:
    """Tests for the Earning record."""

    def test_is_winning(self):
        assert Earning(match='Ticket 1', amount=1.0, total=1.0, date='d').is_winning
        assert not Earning(match='Ticket 1', amount=0.0, total=0.0, date='d').is_winning


class TestLedgerView:
    """Tests for the view variant."""

    def test_constructors(self):
        assert LedgerView.none().mode == ViewMode.NONE
        assert LedgerView.all_players().player_name is None
        view = LedgerView.single('Alice')
        assert view.mode == ViewMode.SINGLE_PLAYER
        assert view.player_name == 'Alice'

    def test_single_needs_name(self):
        with pytest.raises(PydanticValidationError):
            LedgerView(mode=ViewMode.SINGLE_PLAYER)

    @pytest.mark.parametrize('mode', [ViewMode.NONE, ViewMode.ALL_PLAYERS])
    def test_other_modes_reject_name(self, mode):
        with pytest.raises(PydanticValidationError):
            LedgerView(mode=mode, player_name='Alice')
