"""
Ledger exceptions.

Every rejected operation raises ValidationError before touching any state,
so the caller can show the notification and carry on.
"""

from src.ledger.enums import Severity, ValidationReason
from src.ledger.models import Notification


MESSAGES = {
    ValidationReason.EMPTY_NAME: ("Invalid Input", "Please enter a player name."),
    ValidationReason.DUPLICATE_NAME: ("Player Exists", "A player with this name already exists."),
    ValidationReason.MISSING_INPUT: (
        "Invalid Input",
        "Please enter an earning amount and select a player.",
    ),
    ValidationReason.NOT_A_NUMBER: ("Invalid Amount", "Please enter a valid number."),
}


class ValidationError(Exception):
    """
    Raised when user input is rejected by the ledger.

    Attributes:
        reason: ValidationReason saying which check failed
        detail: Optional extra context for logs (not shown to the user)
    """

    def __init__(self, reason: ValidationReason, detail: str | None = None):
        self.reason = reason
        self.detail = detail
        self.title, self.description = MESSAGES[reason]
        message = f"{reason.value}: {detail}" if detail else reason.value
        super().__init__(message)

    def to_notification(self) -> Notification:
        return Notification(
            title=self.title,
            description=self.description,
            severity=Severity.DESTRUCTIVE,
        )
