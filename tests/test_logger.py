"""Unit tests for the ledger logger."""

from config.ledger_config import LedgerConfig
from src.ledger import LedgerView, PlayerLedger, ValidationError
from src.logging import configure_logger, get_logger


class TestLedgerLogger:
    """Tests for LedgerLogger output."""

    def test_get_logger_returns_configured_instance(self, logger):
        assert get_logger() is logger

    def test_writes_log_file(self, tmp_path):
        config = LedgerConfig(log_dir=str(tmp_path / 'logs'), log_to_file=True)
        logger = configure_logger(config)
        try:
            ledger = PlayerLedger(config)
            ledger.add_player('Alice')
            ledger.add_earning('12.5', player_name='Alice')
            try:
                ledger.add_player('alice')
            except ValidationError:
                pass
            for handler in logger.logger.handlers:
                handler.flush()

            text = logger.log_file.read_text()
            assert '✅ Added player Alice (1 on roster)' in text
            assert '[Alice] Ticket 1: +12.50 -> 12.50' in text
            assert 'Add player rejected (duplicate_name)' in text
        finally:
            logger.close()

    def test_debug_only_in_verbose_file(self, tmp_path):
        config = LedgerConfig(log_dir=str(tmp_path / 'logs'), log_to_file=True, verbose=True)
        logger = configure_logger(config)
        try:
            logger.view_changed(LedgerView.single('Alice'))
            for handler in logger.logger.handlers:
                handler.flush()
            assert '🔍 View: single_player (Alice)' in logger.log_file.read_text()
        finally:
            logger.close()

    def test_no_file_when_disabled(self, logger):
        assert logger.log_file is None


class TestSessionId:
    """Tests for the session ID."""

    def test_session_id_is_stable(self, logger):
        from src.utils import get_session_id

        session_id = get_session_id()
        assert session_id.startswith('ledger_')
        assert get_session_id() == session_id
        assert logger.session_id == session_id
