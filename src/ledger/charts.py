"""
Chart data and figures for the ledger.

Turns ledger views into pandas DataFrames and matplotlib figures. Missing
values in the comparison chart stay NaN so each player's line breaks
where they have no ticket instead of dropping to zero.
"""

from typing import Iterable, List, Sequence

import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
import numpy as np
import pandas as pd

from config.ledger_config import LedgerConfig
from src.ledger.enums import ViewMode
from src.ledger.models import ComparisonRow, LedgerView, SeriesPoint

GRID_COLOR = "#d1d5db"
AXIS_COLOR = "#6b7280"
SINGLE_PLAYER_COLOR = "#22C55E"


def single_player_frame(series: Sequence[SeriesPoint]) -> pd.DataFrame:
    """DataFrame indexed by ticket label with a `total` column, original order."""
    frame = pd.DataFrame(
        {"total": [point.total for point in series]},
        index=pd.Index([point.match for point in series], name="match"),
        dtype=float,
    )
    return frame


def comparison_frame(rows: Sequence[ComparisonRow], player_names: Iterable[str]) -> pd.DataFrame:
    """
    DataFrame with one row per ticket label and one column per player.

    Rows keep the order they were given in; None becomes NaN.
    """
    names = list(player_names)
    data = {
        name: [np.nan if row.values.get(name) is None else row.values[name] for row in rows]
        for name in names
    }
    return pd.DataFrame(
        data,
        index=pd.Index([row.match for row in rows], name="match"),
        columns=names,
        dtype=float,
    )


def player_color(index: int, palette: Sequence[str]) -> str:
    """Color for the index-th player; the palette repeats."""
    return palette[index % len(palette)]


def format_money_axis(symbol: str):
    """Y-axis formatter showing the currency symbol."""
    return ticker.FuncFormatter(lambda x, pos: f"{symbol}{x:,.0f}")


def _style_axes(ax, config: LedgerConfig, title: str):
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.set_xlabel('Ticket', fontsize=10, color=AXIS_COLOR)
    ax.set_ylabel(f'Cumulative Earnings ({config.currency_symbol})', fontsize=10, color=AXIS_COLOR)
    ax.tick_params(colors=AXIS_COLOR, labelsize=9)
    ax.yaxis.set_major_formatter(format_money_axis(config.currency_symbol))
    ax.grid(True, color=GRID_COLOR, linestyle='--', alpha=0.7)
    ax.set_axisbelow(True)
    ax.legend(loc='upper left', fontsize=9)


def plot_single_player(frame: pd.DataFrame, config: LedgerConfig, title: str = "Cumulative Earnings Over Time"):
    """
    Line chart of one player's running total.

    Args:
        frame: Output of single_player_frame
        config: Supplies currency symbol and chart height
        title: Chart title

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(10, config.chart_height))
    positions = np.arange(len(frame.index))
    ax.plot(
        positions,
        frame["total"].to_numpy(),
        label=f"Total Earnings ({config.currency_symbol})",
        color=SINGLE_PLAYER_COLOR,
        linewidth=3,
        marker='o',
        markersize=6,
    )
    ax.set_xticks(positions)
    ax.set_xticklabels(frame.index, rotation=30, ha='right')
    _style_axes(ax, config, title)
    fig.tight_layout()
    return fig


def plot_comparison(frame: pd.DataFrame, config: LedgerConfig, title: str = "Cumulative Earnings Comparison"):
    """
    One line per player across the shared ticket labels.

    NaN points are left unplotted so lines break at missing tickets.

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(10, config.chart_height))
    positions = np.arange(len(frame.index))

    labels = legend_labels(list(frame.columns), config.currency_symbol)
    for idx, name in enumerate(frame.columns):
        color = player_color(idx, config.player_colors)
        ax.plot(
            positions,
            frame[name].to_numpy(),
            label=labels[idx],
            color=color,
            linewidth=3,
            marker='o',
            markersize=6,
        )

    ax.set_xticks(positions)
    ax.set_xticklabels(frame.index, rotation=30, ha='right')
    _style_axes(ax, config, title)
    fig.tight_layout()
    return fig


def empty_state_message(view: LedgerView) -> str:
    """Text shown in place of a chart when there is nothing to plot."""
    if view.mode == ViewMode.ALL_PLAYERS:
        return "No earnings data available. Add players and earnings to see the comparison chart!"
    if view.mode == ViewMode.SINGLE_PLAYER:
        return "No earnings recorded yet. Add an earning above to see the chart!"
    return "Select a player from the left panel to view their performance analytics"


def legend_labels(player_names: List[str], symbol: str = "R") -> List[str]:
    return [f"{name} ({symbol})" for name in player_names]
