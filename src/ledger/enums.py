"""
Ledger enums and types.

This module contains all enum types used across the ledger models.
"""

from enum import Enum as PyEnum


class ViewMode(PyEnum):
    """
    What the performance panel is currently showing.

    NONE means no player is selected and the comparison chart is hidden.
    """
    NONE = "none"
    SINGLE_PLAYER = "single_player"
    ALL_PLAYERS = "all_players"


class Severity(PyEnum):
    """Notification severity shown to the user."""
    SUCCESS = "success"
    INFO = "info"
    DESTRUCTIVE = "destructive"


class ValidationReason(PyEnum):
    """Machine-readable reason attached to a rejected ledger operation."""
    EMPTY_NAME = "empty_name"
    DUPLICATE_NAME = "duplicate_name"
    MISSING_INPUT = "missing_input"
    NOT_A_NUMBER = "not_a_number"
