"""
Console Output Manager.
Handles rich tables for block inspection and error reporting.

Standard output is reserved for the rendered document, so errors always go
to the stderr console.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hypa.constants import MAX_TABLE_TEXT_LENGTH
from hypa.parsing.blocks import Block, LinkBlock

console = Console()
err_console = Console(stderr=True)


def _shorten(text: str, limit: int = MAX_TABLE_TEXT_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def build_block_table(blocks: tuple[Block, ...], source_name: str) -> Table:
    """
    Builds a table listing every parsed block.

    Args:
        blocks: Parsed blocks in input order.
        source_name: Name of the input, shown in the title.

    Returns:
        A Rich Table with one row per block.
    """
    table = Table(title=f"Blocks: {source_name}", box=box.ROUNDED)
    table.add_column("#", style="dim white", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Content", style="white", overflow="fold")
    table.add_column("Label", style="white", overflow="fold")

    for idx, block in enumerate(blocks, start=1):
        if isinstance(block, LinkBlock):
            label = escape(block.label) if block.label is not None else "[dim](none)[/dim]"
            table.add_row(str(idx), "link", escape(_shorten(block.url)), label)
        else:
            table.add_row(str(idx), "text", escape(_shorten(block.content)), "")

    return table


def print_block_summary(blocks: tuple[Block, ...], source_name: str):
    """Prints the block table followed by per-kind totals."""
    links = sum(1 for block in blocks if isinstance(block, LinkBlock))
    console.print(build_block_table(blocks, source_name))
    console.print(f"{len(blocks)} blocks ({links} links, {len(blocks) - links} text)")


def print_error(message: str):
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)
