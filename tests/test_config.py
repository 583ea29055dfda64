"""Unit tests for config loading."""

import json

import pytest

from config.ledger_config import DEFAULT_PLAYER_COLORS, LedgerConfig


class TestLedgerConfig:
    """Tests for LedgerConfig.from_file."""

    def test_defaults(self):
        config = LedgerConfig()
        assert config.currency_symbol == 'R'
        assert config.date_format == '%Y/%m/%d'
        assert config.player_colors == DEFAULT_PLAYER_COLORS
        assert len(config.player_colors) == 10
        assert config.verbose is False

    def test_missing_file_uses_defaults(self, tmp_path):
        config = LedgerConfig.from_file(tmp_path / 'missing.json')
        assert config == LedgerConfig()

    def test_load_from_file(self, tmp_path):
        path = tmp_path / 'ledger_config.json'
        path.write_text(json.dumps({'currency_symbol': '$', 'verbose': True}))

        config = LedgerConfig.from_file(path)

        assert config.currency_symbol == '$'
        assert config.verbose is True
        assert config.date_format == '%Y/%m/%d'

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / 'from_env.json'
        path.write_text(json.dumps({'currency_symbol': '€'}))
        monkeypatch.setenv('LEDGER_CONFIG_PATH', str(path))

        assert LedgerConfig.from_file().currency_symbol == '€'

    def test_unknown_keys_rejected(self, tmp_path):
        path = tmp_path / 'ledger_config.json'
        path.write_text(json.dumps({'currency': '$'}))

        with pytest.raises(ValueError, match='currency'):
            LedgerConfig.from_file(path)

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            LedgerConfig(player_colors=[])

    def test_date_format_used_for_earnings(self, config):
        from datetime import date
        from src.ledger import PlayerLedger

        config.date_format = '%d.%m.%Y'
        ledger = PlayerLedger(config, today=lambda: date(2026, 10, 19))
        ledger.add_player('Alice')
        ledger.add_earning('1', player_name='Alice')

        assert ledger.get_player('Alice').earnings[0].date == '19.10.2026'
