"""
Ledger package - Player earnings tracking.

Contains:
- PlayerLedger: roster, mutations and derived views
- Data models: frozen Pydantic records for players and earnings
- ValidationError: raised for rejected user input
- Amounts: strict amount parsing and money formatting
- Charts: DataFrame and matplotlib helpers for the dashboard
"""

from src.ledger.enums import Severity, ValidationReason, ViewMode
from src.ledger.models import (
    AggregateStats,
    ComparisonRow,
    Earning,
    LedgerView,
    Notification,
    Player,
    SeriesPoint,
)
from src.ledger.exceptions import ValidationError
from src.ledger.service import PlayerLedger

__all__ = [
    'PlayerLedger',
    'Player',
    'Earning',
    'LedgerView',
    'AggregateStats',
    'Notification',
    'SeriesPoint',
    'ComparisonRow',
    'ViewMode',
    'Severity',
    'ValidationReason',
    'ValidationError',
]
