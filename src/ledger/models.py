"""
Pydantic data models for the betting ledger.

Every model is frozen: mutations on the ledger build new Player records
instead of editing existing ones, so a reference handed to the dashboard
never changes underneath it.
"""

from typing import Dict, Optional, Tuple
from pydantic import BaseModel, Field, model_validator

from src.ledger.enums import Severity, ViewMode

TICKET_PREFIX = "Ticket"


def ticket_label(index: int) -> str:
    """Label for the index-th (1-based) ticket of a player."""
    return f"{TICKET_PREFIX} {index}"


class Earning(BaseModel):
    """
    One recorded result for a player.

    `total` is a snapshot of the player's running total after `amount`
    was applied.
    """
    match: str = Field(..., description="Generated ticket label (e.g., 'Ticket 3')")
    amount: float = Field(..., description="Signed result; negative for a loss")
    total: float = Field(..., description="Running total after this entry")
    date: str = Field(..., description="Date the entry was recorded, already formatted")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "match": "Ticket 2",
                "amount": -20.0,
                "total": 30.0,
                "date": "2026/10/19",
            }
        }

    @property
    def is_winning(self) -> bool:
        return self.amount > 0


class Player(BaseModel):
    """
    A named participant whose betting results are tracked.

    `total_earnings` always equals the sum of every earning amount. It is
    only ever produced by `with_earning`, never set on its own.
    """
    name: str = Field(..., min_length=1, description="Display name, stored trimmed")
    earnings: Tuple[Earning, ...] = Field(
        default_factory=tuple,
        description="Earnings in the order they were recorded"
    )
    total_earnings: float = Field(default=0.0, description="Sum of all earning amounts")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "Alice",
                "earnings": [
                    {"match": "Ticket 1", "amount": 50.0, "total": 50.0, "date": "2026/10/19"}
                ],
                "total_earnings": 50.0,
            }
        }

    @staticmethod
    def key_for(name: str) -> str:
        """Case-insensitive lookup key for a player name."""
        return name.strip().casefold()

    @property
    def key(self) -> str:
        return self.key_for(self.name)

    @property
    def is_profitable(self) -> bool:
        return self.total_earnings > 0

    def next_ticket(self) -> str:
        return ticket_label(len(self.earnings) + 1)

    def with_earning(self, amount: float, date: str) -> "Player":
        """Return a new Player with one more earning appended."""
        new_total = self.total_earnings + amount
        entry = Earning(
            match=self.next_ticket(),
            amount=amount,
            total=new_total,
            date=date,
        )
        return self.model_copy(update={
            "earnings": self.earnings + (entry,),
            "total_earnings": new_total,
        })

    def earning_for(self, match: str) -> Optional[Earning]:
        """Find the earning with exactly this ticket label."""
        for earning in self.earnings:
            if earning.match == match:
                return earning
        return None

    def recent_earnings(self) -> list[Earning]:
        """Earnings newest first, as shown in the history panel."""
        return list(reversed(self.earnings))


class LedgerView(BaseModel):
    """
    What the performance panel shows.

    `player_name` is set only for SINGLE_PLAYER views. Use the
    constructors rather than building one by hand.
    """
    mode: ViewMode = ViewMode.NONE
    player_name: Optional[str] = None

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_player_matches_mode(self) -> "LedgerView":
        if self.mode == ViewMode.SINGLE_PLAYER and not self.player_name:
            raise ValueError("single player view needs a player name")
        if self.mode != ViewMode.SINGLE_PLAYER and self.player_name is not None:
            raise ValueError(f"{self.mode.value} view cannot carry a player name")
        return self

    @classmethod
    def none(cls) -> "LedgerView":
        return cls(mode=ViewMode.NONE)

    @classmethod
    def single(cls, player_name: str) -> "LedgerView":
        return cls(mode=ViewMode.SINGLE_PLAYER, player_name=player_name)

    @classmethod
    def all_players(cls) -> "LedgerView":
        return cls(mode=ViewMode.ALL_PLAYERS)


class AggregateStats(BaseModel):
    """Dashboard headline numbers."""
    total_players: int = Field(0, ge=0)
    total_winnings: float = 0.0
    profitable_players: int = Field(0, ge=0)
    win_rate: int = Field(0, ge=0, le=100, description="Percent of players in profit")

    class Config:
        frozen = True


class Notification(BaseModel):
    """User-facing outcome of a ledger operation."""
    title: str
    description: str
    severity: Severity = Severity.SUCCESS

    class Config:
        frozen = True


class SeriesPoint(BaseModel):
    """One point on a single player's cumulative chart."""
    match: str
    total: float

    class Config:
        frozen = True


class ComparisonRow(BaseModel):
    """
    One ticket label across every player.

    A value of None means the player has no entry with that label; charts
    must leave a gap there rather than plot zero.
    """
    match: str
    values: Dict[str, Optional[float]] = Field(default_factory=dict)

    class Config:
        frozen = True
