"""
Player Ledger service.

Holds the roster of players and their earnings for one dashboard session,
applies mutations, and produces the views the dashboard renders. Nothing
is persisted; a new ledger starts empty.
"""

from datetime import date
from typing import Callable, List, Optional, Tuple

from config.ledger_config import LedgerConfig
from src.ledger.enums import Severity, ValidationReason, ViewMode
from src.ledger.exceptions import ValidationError
from src.ledger.models import (
    AggregateStats,
    ComparisonRow,
    LedgerView,
    Notification,
    Player,
    SeriesPoint,
)
from src.logging import get_logger
from src.ledger.amounts import format_signed, parse_amount, round_half_away


class PlayerLedger:
    """
    In-memory ledger of players, their earnings and the current view.

    The roster is a tuple of frozen Player records that is rebuilt on every
    mutation. The selected player is stored by name only and looked up
    again on each access, so callers always see the latest record.

    Usage:
        ledger = PlayerLedger()
        ledger.add_player("Alice")
        ledger.select_player("Alice")
        ledger.add_earning("50")
        ledger.add_earning("-20")

        ledger.selected_player.total_earnings  # 30.0
        ledger.aggregate_stats().win_rate      # 100

    Rejected input raises ValidationError without changing anything; use
    `error.to_notification()` to show it.
    """

    def __init__(
        self,
        config: Optional[LedgerConfig] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Initialize an empty ledger.

        Args:
            config: Display settings; loaded from file when omitted
            today: Clock used to stamp new earnings (defaults to date.today)
        """
        self.config = config or LedgerConfig.from_file()
        self._today = today or date.today
        self._players: Tuple[Player, ...] = ()
        self._view = LedgerView.none()

    @property
    def logger(self):
        """
        The session logger, looked up on each use.

        Log output follows whatever config was passed to configure_logger,
        not self.config; entry points call configure_logger(config) first.
        """
        return get_logger()

    # ─── State ──────────────────────────────────────────────────────

    @property
    def players(self) -> Tuple[Player, ...]:
        return self._players

    @property
    def view(self) -> LedgerView:
        return self._view

    @property
    def view_mode(self) -> ViewMode:
        return self._view.mode

    @property
    def selected_player(self) -> Optional[Player]:
        """The player shown in single player view, resolved by name."""
        if self._view.mode != ViewMode.SINGLE_PLAYER:
            return None
        return self.get_player(self._view.player_name)

    def get_player(self, name: str) -> Optional[Player]:
        """Find a player by exact name."""
        for player in self._players:
            if player.name == name:
                return player
        return None

    def has_players_with_earnings(self) -> bool:
        return any(player.earnings for player in self._players)

    # ─── Mutations ──────────────────────────────────────────────────

    def add_player(self, name: str) -> Notification:
        """
        Add a new player with no earnings.

        Args:
            name: Player name; surrounding whitespace is dropped

        Returns:
            Notification: Success message for the dashboard

        Raises:
            ValidationError: EMPTY_NAME for a blank name, DUPLICATE_NAME if a
                player with the same name (ignoring case) already exists
        """
        try:
            cleaned = (name or "").strip()
            if not cleaned:
                raise ValidationError(ValidationReason.EMPTY_NAME)

            key = Player.key_for(cleaned)
            if any(player.key == key for player in self._players):
                raise ValidationError(ValidationReason.DUPLICATE_NAME, f"'{cleaned}' already exists")
        except ValidationError as e:
            self.logger.validation_failed("Add player", e)
            raise

        player = Player(name=cleaned)
        self._players = self._players + (player,)
        self.logger.player_added(player, len(self._players))

        return Notification(
            title="Player Added",
            description=f"{cleaned} has been added to the dashboard.",
            severity=Severity.SUCCESS,
        )

    def add_earning(self, amount_raw: str, player_name: Optional[str] = None) -> Notification:
        """
        Record a win or loss for a player.

        Args:
            amount_raw: Amount as typed by the user (negative for a loss)
            player_name: Target player; defaults to the selected player

        Returns:
            Notification: "Winning Added!" for positive amounts, otherwise
                "Loss Recorded"

        Raises:
            ValidationError: MISSING_INPUT when the amount is blank or no
                player is resolved, NOT_A_NUMBER when the amount does not parse
        """
        try:
            target = self.get_player(player_name) if player_name is not None else self.selected_player
            if not amount_raw or not amount_raw.strip() or target is None:
                raise ValidationError(
                    ValidationReason.MISSING_INPUT,
                    "no player selected" if target is None else "amount is empty",
                )
            amount = parse_amount(amount_raw)
        except ValidationError as e:
            self.logger.validation_failed("Add earning", e)
            raise

        stamp = self._today().strftime(self.config.date_format)
        updated = target.with_earning(amount, stamp)
        self._players = tuple(
            updated if player.name == target.name else player
            for player in self._players
        )
        self.logger.earning_recorded(updated, updated.earnings[-1])

        symbol = self.config.currency_symbol
        winning = amount > 0
        return Notification(
            title="Winning Added!" if winning else "Loss Recorded",
            description=f"{format_signed(amount, symbol)} has been recorded for {target.name}.",
            severity=Severity.SUCCESS if winning else Severity.INFO,
        )

    def select_player(self, name: str) -> Player:
        """
        Show a single player's performance.

        Raises:
            ValidationError: MISSING_INPUT if no player has this name
        """
        player = self.get_player(name)
        if player is None:
            error = ValidationError(ValidationReason.MISSING_INPUT, f"no player named '{name}'")
            self.logger.validation_failed("Select player", error)
            raise error
        self._set_view(LedgerView.single(player.name))
        return player

    def show_all_players(self):
        """Switch to the comparison chart and drop the selection."""
        self._set_view(LedgerView.all_players())

    def clear_view(self):
        self._set_view(LedgerView.none())

    def set_view_mode(self, mode: ViewMode, player_name: Optional[str] = None):
        """Generic entry point for view changes coming from the dashboard."""
        if mode == ViewMode.SINGLE_PLAYER:
            self.select_player(player_name)
        elif mode == ViewMode.ALL_PLAYERS:
            self.show_all_players()
        else:
            self.clear_view()

    def _set_view(self, view: LedgerView):
        self._view = view
        self.logger.view_changed(view)

    # ─── Derived views ──────────────────────────────────────────────

    def aggregate_stats(self) -> AggregateStats:
        """Headline numbers for the stat cards."""
        total_players = len(self._players)
        total_winnings = sum(player.total_earnings for player in self._players)
        profitable = sum(1 for player in self._players if player.is_profitable)
        win_rate = round_half_away(profitable / total_players * 100) if total_players > 0 else 0

        stats = AggregateStats(
            total_players=total_players,
            total_winnings=total_winnings,
            profitable_players=profitable,
            win_rate=win_rate,
        )
        self.logger.stats_summary(stats)
        return stats

    def single_player_series(self, player: Optional[Player] = None) -> List[SeriesPoint]:
        """
        Cumulative totals for one player in the order they were recorded.

        Defaults to the selected player; returns an empty list if there is none.
        """
        player = player or self.selected_player
        if player is None:
            return []
        return [SeriesPoint(match=e.match, total=e.total) for e in player.earnings]

    def all_players_series(self) -> List[ComparisonRow]:
        """
        Every ticket label across all players with each player's total.

        Labels are sorted as plain strings, so "Ticket 10" comes before
        "Ticket 2". A player without an entry for a label gets None.
        """
        labels = sorted({e.match for player in self._players for e in player.earnings})

        rows = []
        for label in labels:
            values = {}
            for player in self._players:
                earning = player.earning_for(label)
                values[player.name] = earning.total if earning else None
            rows.append(ComparisonRow(match=label, values=values))
        return rows

    def title(self) -> str:
        """Heading for the performance panel."""
        if self._view.mode == ViewMode.ALL_PLAYERS:
            return "All Players Performance"
        player = self.selected_player
        if player is not None:
            return f"{player.name}'s Performance"
        return "Select a Player"
