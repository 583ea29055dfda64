#!/usr/bin/env python3
"""
Script to render the all players comparison chart from a JSON file.

The file lists players and the amounts to record for each, in order:

    {"players": {"Alice": [50, -20], "Bob": ["5", "5"]}}

Every entry goes through PlayerLedger exactly as if it was typed into the
dashboard, so rejected names or amounts are logged and skipped.
"""

import argparse
import json
from pathlib import Path

import matplotlib.pyplot as plt

from config.ledger_config import LedgerConfig
from src.ledger import PlayerLedger, ValidationError
from src.ledger.charts import comparison_frame, plot_comparison
from src.logging import configure_logger, get_logger


def load_actions(json_path: str | Path) -> dict[str, list[str]]:
    """
    Load player entries from a JSON file.

    Amounts are returned as strings so they are parsed by the ledger.
    """
    with open(json_path, "r") as f:
        data = json.load(f)

    players = data.get("players")
    if not isinstance(players, dict):
        raise ValueError(f"{json_path} must contain a 'players' object")

    return {
        name: [str(amount) for amount in amounts]
        for name, amounts in players.items()
    }


def replay(actions: dict[str, list[str]], config: LedgerConfig) -> PlayerLedger:
    """Build a ledger by adding each player and recording their amounts."""
    logger = get_logger()
    ledger = PlayerLedger(config)

    for name, amounts in actions.items():
        try:
            ledger.add_player(name)
        except ValidationError:
            logger.warning(f"Skipping player '{name}'")
            continue

        player_name = name.strip()
        for amount in amounts:
            try:
                ledger.add_earning(amount, player_name=player_name)
            except ValidationError:
                logger.warning(f"Skipping amount '{amount}' for {player_name}")

    ledger.show_all_players()
    return ledger


def main():
    parser = argparse.ArgumentParser(
        description="Render the cumulative earnings comparison chart"
    )
    parser.add_argument(
        "json_file",
        help="Path to the JSON file with players and amounts"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output path for the plot image (e.g., earnings.png)"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a ledger config JSON file"
    )
    parser.add_argument(
        "-t", "--title",
        default="Cumulative Earnings Comparison",
        help="Title for the plot"
    )

    args = parser.parse_args()

    json_path = Path(args.json_file)
    if not json_path.exists():
        print(f"Error: Could not find actions file at {json_path}")
        return 1

    config = LedgerConfig.from_file(args.config)
    logger = configure_logger(config)
    logger.info(f"Loading ledger actions from: {json_path}")

    ledger = replay(load_actions(json_path), config)
    if not ledger.has_players_with_earnings():
        logger.error("No earnings recorded, nothing to plot")
        return 1

    stats = ledger.aggregate_stats()
    logger.detail(f"{stats.total_players} players, win rate {stats.win_rate}%")

    frame = comparison_frame(ledger.all_players_series(), [p.name for p in ledger.players])
    fig = plot_comparison(frame, config, title=args.title)

    if args.output:
        fig.savefig(args.output, dpi=150, bbox_inches='tight')
        logger.success(f"Plot saved to: {args.output}")
    else:
        plt.show()

    plt.close(fig)
    return 0


if __name__ == "__main__":
    exit(main())
