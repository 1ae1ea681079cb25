"""Rich console formatter for account positions."""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from ..adapters import Category, Position
from ..processors import summarize_positions

CATEGORY_STYLES = {
    Category.STAKING: "magenta",
    Category.LENDING: "green",
    Category.DEBT: "red",
    Category.LIQUIDITY: "cyan",
    Category.FARMING: "yellow",
    Category.REWARDS: "bright_green",
    Category.YIELD: "blue",
}


def _truncate_address(address: str) -> str:
    """Truncate address for display."""
    if len(address) <= 16:
        return address
    return f"{address[:10]}...{address[-4:]}"


def _protocol_table(positions: list[Position]) -> Table:
    table = Table(expand=True, show_lines=False)
    table.add_column("Position", no_wrap=True)
    table.add_column("Category")
    table.add_column("Token", style="cyan")
    table.add_column("Amount", justify="right", style="green")
    table.add_column("Raw", justify="right", style="dim")
    for position in positions:
        style = CATEGORY_STYLES.get(position.category, "white")
        table.add_row(
            position.name,
            f"[{style}]{position.category.value}[/]",
            position.token,
            position.display_amount,
            f"{position.raw_amount:,.0f}",
        )
    return table


def format_positions_table(
    positions: list[Position],
    account_address: str,
    console: Console | None = None,
) -> None:
    """Print one panel per protocol plus a category summary to stdout.

    Args:
        positions: Positions to display
        account_address: Scanned account
        console: Console to print to, a new stdout console by default
    """
    console = console or Console()
    summary = summarize_positions(positions)

    summary_table = Table(show_header=False, box=None, padding=(0, 1))
    summary_table.add_column("Key", style="dim")
    summary_table.add_column("Value", style="cyan")
    summary_table.add_row("Account", _truncate_address(account_address))
    summary_table.add_row("Positions", str(summary.total))
    summary_table.add_row("Protocols", str(len(summary.protocols)))
    for category, count in summary.category_counts.items():
        summary_table.add_row(category.value, str(count))

    panels: list[Panel] = [
        Panel(summary_table, title="[bold]Summary[/]", border_style="green")
    ]
    for protocol, protocol_positions in summary.by_protocol.items():
        panels.append(
            Panel(
                _protocol_table(protocol_positions),
                title=f"[bold]{protocol}[/]",
                border_style="cyan",
            )
        )
    if not positions:
        panels.append(Panel("[dim]No DeFi positions found[/]", border_style="dim"))

    console.print()
    console.print(
        Panel(
            Group(*panels),
            title="[bold white]DeFi Positions[/]",
            border_style="white",
            padding=(1, 2),
        )
    )
    console.print()
