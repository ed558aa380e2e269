#!/usr/bin/env python3
"""
Stats Report
============
Rich-based terminal report for a built chain.

Usage:
    from wordchain.ui import render_stats

    render_stats(model.stats())
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich import box

from .chain import ChainStats


def _display_key(key: str) -> str:
    # placeholders are empty strings; show them so " a" reads as "· a"
    return ' '.join(word or '·' for word in key.split(' '))


def stats_tables(stats: ChainStats) -> list:
    """Build the summary and top-prefix tables."""
    summary = Table(title=f"Order-{stats.max_order} chain", box=box.SIMPLE)
    summary.add_column("Order", justify="right")
    summary.add_column("Prefixes", justify="right")
    for order, count in stats.prefixes_by_order.items():
        summary.add_row(str(order), str(count))
    summary.add_section()
    summary.add_row("total", str(stats.prefixes))

    top = Table(title="Most observed prefixes", box=box.SIMPLE)
    top.add_column("#", justify="right", style="dim")
    top.add_column("Prefix")
    top.add_column("Observations", justify="right")
    for i, (key, count) in enumerate(stats.top_prefixes, 1):
        top.add_row(str(i), _display_key(key), str(count))

    return [summary, top]


def render_stats(stats: ChainStats, console: Optional[Console] = None):
    """Print the stats report."""
    console = console or Console()
    for table in stats_tables(stats):
        console.print(table)
    console.print(
        f"{stats.observations} observations, "
        f"{stats.line_ends} line ends",
        highlight=False,
    )
