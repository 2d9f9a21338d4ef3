"""
🔗 Link Display

Console rendering of links.
"""

from rich.console import Console
from rich.table import Table

from .config import get_settings
from .link import Link

console = Console()


def format_columns(link: Link, arrow: str | None = None) -> str:
    """Format the column mappings of a link on one line.

    Example:
        >>> format_columns(Link("a", "b", link_columns=[{"id": "a_id"}, {"k1": "x", "k2": "y"}]))
        'id → a_id | k1 → x, k2 → y'
    """
    if arrow is None:
        arrow = get_settings().arrow

    if not link.link_columns:
        return "-"

    return " | ".join(
        ", ".join(f"{src} {arrow} {dst}" for src, dst in mapping.items())
        for mapping in link.link_columns
    )


def links_table(links: list[Link], title: str = "🔗 Links") -> Table:
    """Build a table with one row per link."""
    tbl = Table(title=title, show_header=True, header_style="bold cyan")
    tbl.add_column("From")
    tbl.add_column("To")
    tbl.add_column("Type", style="dim")
    tbl.add_column("Columns")

    for link in links:
        tbl.add_row(
            link.from_dataset,
            link.to_dataset,
            link.link_type or "-",
            format_columns(link),
        )

    return tbl


def show_links(links: list[Link], out: Console | None = None) -> None:
    """Print links to the console.

    Args:
        links: Links to show
        out: Console to print to (default: module console)
    """
    if out is None:
        out = console

    if not links:
        out.print("[dim]No links defined[/dim]")
        return

    out.print(links_table(links))
