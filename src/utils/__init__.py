"""
Utils package - Shared utilities.

Contains:
- Session ID for log naming
"""

from src.utils.session import get_session_id

__all__ = [
    "get_session_id",
]
