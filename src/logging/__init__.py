"""
Logging package - Universal ledger logger.

Usage:
    from src.logging import get_logger

    logger = get_logger()
    logger.info("Starting dashboard...")
    logger.success("Player added!")
"""

from src.logging.logger import get_logger, configure_logger, LedgerLogger

__all__ = [
    "get_logger",
    "configure_logger",
    "LedgerLogger",
]
