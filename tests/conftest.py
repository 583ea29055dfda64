"""Shared fixtures for ledger tests."""

from datetime import date

import matplotlib

matplotlib.use('Agg')

import pytest

from config.ledger_config import LedgerConfig
from src.ledger import PlayerLedger
from src.logging import configure_logger


@pytest.fixture
def config(tmp_path):
    """Config that logs into a temporary directory."""
    return LedgerConfig(log_dir=str(tmp_path / 'logs'), log_to_file=False)


@pytest.fixture(autouse=True)
def logger(config):
    logger = configure_logger(config)
    yield logger
    logger.close()


@pytest.fixture
def ledger(config):
    """Empty ledger stamping every earning with 2026-10-19."""
    return PlayerLedger(config, today=lambda: date(2026, 10, 19))


@pytest.fixture
def alice_and_bob(ledger):
    """Alice earns 10, Bob earns 5 twice."""
    ledger.add_player('Alice')
    ledger.add_player('Bob')
    ledger.add_earning('10', player_name='Alice')
    ledger.add_earning('5', player_name='Bob')
    ledger.add_earning('5', player_name='Bob')
    return ledger
