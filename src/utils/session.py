from datetime import datetime
from typing import Optional

_session_id: Optional[str] = None


def get_session_id(now: Optional[datetime] = None) -> str:
    """
    Get or create the ID of the current dashboard session.

    The first call fixes it; later calls return the same value. The logger
    uses it to name its logger and log file, e.g. ledger_2026_10_19_081500.
    """
    global _session_id
    if _session_id is None:
        stamp = (now or datetime.now()).strftime("%Y_%m_%d_%H%M%S")
        _session_id = f"ledger_{stamp}"
    return _session_id
