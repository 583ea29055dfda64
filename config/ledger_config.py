from dataclasses import dataclass, field, fields
from pathlib import Path
import json
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/ledger_config.json"

DEFAULT_PLAYER_COLORS = [
    "#22C55E",  # Success green
    "#6366F1",  # Primary indigo
    "#EF4444",  # Danger red
    "#8B5CF6",  # Purple
    "#F59E0B",  # Orange
    "#10B981",  # Emerald
    "#DC2626",  # Red
    "#3B82F6",  # Blue
    "#8B5A2B",  # Brown
    "#EC4899",  # Pink
]


@dataclass
class LedgerConfig:
    """Configuration for the betting ledger dashboard."""
    currency_symbol: str = "R"
    date_format: str = "%Y/%m/%d"
    player_colors: list[str] = field(default_factory=lambda: list(DEFAULT_PLAYER_COLORS))
    chart_height: float = 4.0
    log_dir: str = "logs"
    log_to_file: bool = True
    verbose: bool = False

    def __post_init__(self):
        if not self.player_colors:
            raise ValueError("player_colors must contain at least one color")

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "LedgerConfig":
        """
        Load config from a JSON file.

        The path defaults to LEDGER_CONFIG_PATH from the environment,
        then to config/ledger_config.json.
        """
        config_path = Path(path or os.getenv("LEDGER_CONFIG_PATH", DEFAULT_CONFIG_PATH))
        if not config_path.exists():
            print(f"⚠️  Config file not found at {config_path}, using defaults")
            return cls()

        with open(config_path) as f:
            data = json.load(f)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

        return cls(**data)
