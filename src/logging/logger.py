import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING
from src.utils.session import get_session_id
from config.ledger_config import LedgerConfig

if TYPE_CHECKING:
    from src.ledger.exceptions import ValidationError
    from src.ledger.models import AggregateStats, Earning, LedgerView, Player

_logger_instance: Optional['LedgerLogger'] = None


def get_logger() -> 'LedgerLogger':
    """Get the global logger instance. Creates one if needed."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = LedgerLogger()
    return _logger_instance


def configure_logger(config: LedgerConfig) -> 'LedgerLogger':
    """Replace the global logger with one built from an explicit config."""
    global _logger_instance
    if _logger_instance is not None:
        _logger_instance.close()
    _logger_instance = LedgerLogger(config)
    return _logger_instance


class LedgerLogger:
    """Session logger for the ledger dashboard; file output follows LedgerConfig."""

    def __init__(self, config: Optional[LedgerConfig] = None):
        self.session_id = get_session_id()
        self.config = config or LedgerConfig.from_file()

        self.logger = logging.getLogger(self.session_id)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.logger.handlers.clear()

        # File handler - DEBUG only in verbose mode
        self.log_file: Optional[Path] = None
        if self.config.log_to_file:
            log_dir = Path(self.config.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = log_dir / f"{self.session_id}.log"
            file_handler = logging.FileHandler(self.log_file)
            if self.config.verbose:
                file_handler.setLevel(logging.DEBUG)
            else:
                file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter('%(message)s'))
            self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(console_handler)

    def close(self):
        """Detach and close every handler."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # ─── Semantic Methods (delegate to self.logger) ────────────────

    def info(self, msg: str):
        """General info message (INFO level)."""
        self.logger.info(msg)

    def debug(self, msg: str):
        """Debug message (DEBUG level)."""
        self.logger.debug(msg)

    def warning(self, msg: str):
        """Warning message (WARNING level)."""
        self.logger.warning(f"⚠️  {msg}")

    def error(self, msg: str):
        """Error message (ERROR level)."""
        self.logger.error(f"❌ {msg}")

    def success(self, msg: str):
        """Success message (INFO level)."""
        self.logger.info(f"✅ {msg}")

    def section(self, title: str):
        """Section header with dividers."""
        self.logger.info(f"\n{'='*60}")
        self.logger.info(title)
        self.logger.info(f"{'='*60}\n")

    def detail(self, msg: str):
        """Indented detail message."""
        self.logger.info(f"   {msg}")

    # ─── Ledger events ─────────────────────────────────────────────

    def session_start(self):
        self.section(f"""
BETTING LEDGER SESSION STARTED

Session ID: {self.session_id}
Currency: {self.config.currency_symbol}
Verbose: {self.config.verbose}
""")

    def player_added(self, player: 'Player', roster_size: int):
        self.success(f"Added player {player.name} ({roster_size} on roster)")

    def earning_recorded(self, player: 'Player', earning: 'Earning'):
        self.info(f"📋 [{player.name}] {earning.match}: {earning.amount:+.2f} -> {earning.total:.2f}")
        self.debug(f"   Recorded on {earning.date}, {len(player.earnings)} tickets total")

    def validation_failed(self, operation: str, error: 'ValidationError'):
        self.warning(f"{operation} rejected ({error.reason.value}): {error.detail or error.description}")

    def view_changed(self, view: 'LedgerView'):
        if view.player_name:
            self.debug(f"🔍 View: {view.mode.value} ({view.player_name})")
        else:
            self.debug(f"🔍 View: {view.mode.value}")

    def stats_summary(self, stats: 'AggregateStats'):
        self.debug("Ledger Summary:")
        self.debug(f"   Players: {stats.total_players}")
        self.debug(f"   Total Winnings: {stats.total_winnings:.2f}")
        self.debug(f"   Profitable: {stats.profitable_players}")
        self.debug(f"   Win Rate: {stats.win_rate}%")
