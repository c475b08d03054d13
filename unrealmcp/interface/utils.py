"""Interface utilities for unreal-mcp."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

# stdout carries the MCP protocol; everything human-facing goes to stderr
console = Console(stderr=True)


def setup_logging(debug: bool = False) -> None:
    """Route logging through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def tools_table(tools: list) -> Table:
    """Table of tools for ``tools list``."""
    table = Table(title="Available Tools")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("Description")

    for tool in sorted(tools, key=lambda t: t.name):
        desc = (
            tool.description[:60] + "..."
            if len(tool.description) > 60
            else tool.description
        )
        table.add_row(tool.name, tool.category, "+" if tool.enabled else "-", desc)

    return table
