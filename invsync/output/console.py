# invsync Console Output
# Rich-based console output for user-friendly display

from datetime import datetime
from typing import Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from invsync.store.entities import Category, EntityKind, Item, Location
from invsync.store.memory import MemoryEntityStore
from invsync.sync.engine import PassResult
from invsync.sync.pending import PendingRelationshipTracker
from invsync.sync.state import SyncState, SyncStatus


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for sync operations.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True, console: Optional[RichConsole] = None):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
            console: Rich console to write to (created if not provided).
        """
        self.verbose = verbose
        self._console = console or RichConsole(no_color=not colored)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{message}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{message}[/blue]")

    def print_state(self, state: SyncState, last_sync: Optional[datetime] = None) -> None:
        """Print the sync state line."""
        styles = {
            SyncStatus.IDLE: "dim",
            SyncStatus.SYNCING: "yellow",
            SyncStatus.SUCCESS: "green",
            SyncStatus.ERROR: "red",
        }
        style = styles.get(state.status, "white")
        when = last_sync.strftime("%Y-%m-%d %H:%M:%S") if last_sync else "never"
        self._console.print(f"Sync state: [{style}]{escape(str(state))}[/{style}]  (last sync: {when})")

    def print_pass_result(self, result: PassResult) -> None:
        """
        Print a pass summary panel.

        Args:
            result: Result of a reconciliation pass.
        """
        lines = [
            f"Records: {result.created} created, {result.updated} updated, "
            f"{result.deleted} deleted, {result.skipped} skipped",
            f"Links: {result.links} made, {result.pending} pending",
        ]
        if result.purged_zones:
            lines.append(f"Zones purged: {', '.join(result.purged_zones)} ({result.purged_entities} entities)")
        if result.commit_errors:
            lines.append(f"[yellow]Save failures: {len(result.commit_errors)} (will retry next pass)[/yellow]")
            if self.verbose:
                lines.extend(f"  [dim]{error}[/dim]" for error in result.commit_errors)

        self._console.print(
            Panel(
                "\n".join(lines),
                title="Sync Result",
                border_style="green" if result.committed else "yellow",
            )
        )

    def print_inventory(self, store: MemoryEntityStore) -> None:
        """Print locations, categories and items held locally."""
        locations: list[Location] = store.all(EntityKind.LOCATION)  # type: ignore[assignment]
        categories: list[Category] = store.all(EntityKind.CATEGORY)  # type: ignore[assignment]
        items: list[Item] = store.all(EntityKind.ITEM)  # type: ignore[assignment]

        if not (locations or categories or items):
            self._console.print("[dim]Local inventory is empty[/dim]")
            return

        for title, rows in (("Locations", locations), ("Categories", categories)):
            table = Table(title=title, show_header=True, header_style="bold")
            table.add_column("Name", style="cyan")
            table.add_column("Order", justify="right")
            table.add_column("In Row", justify="center")
            if self.verbose:
                table.add_column("ID", style="dim")
            for entity in sorted(rows, key=lambda e: (e.sort_order, e.name)):
                row = [entity.name, str(entity.sort_order), "✓" if entity.display_in_row else "✗"]
                if self.verbose:
                    row.append(str(entity.id))
                table.add_row(*row)
            self._console.print(table)

        table = Table(title="Items", show_header=True, header_style="bold")
        table.add_column("Name", style="cyan")
        table.add_column("Qty", justify="right")
        table.add_column("Location")
        table.add_column("Category")
        table.add_column("Modified", style="dim")
        for item in sorted(items, key=lambda i: (i.sort_order, i.name)):
            table.add_row(
                item.name,
                str(item.quantity),
                self._link_label(store, item.location),
                self._link_label(store, item.category),
                item.modified_date.strftime("%Y-%m-%d %H:%M"),
            )
        self._console.print(table)

    @staticmethod
    def _link_label(store: MemoryEntityStore, target: Optional[Location | Category]) -> str:
        if target is None:
            return "[dim]-[/dim]"
        if store.get(target.kind, target.id) is None:
            return f"[red]{target.name} (deleted)[/red]"
        return target.name

    def print_pending(self, tracker: PendingRelationshipTracker) -> None:
        """Print relationships still waiting for their targets."""
        if not len(tracker):
            return
        table = Table(title="Pending Relationships", show_header=True, header_style="bold")
        table.add_column("Item", style="cyan")
        table.add_column("Location")
        table.add_column("Category")
        for item_id, refs in tracker.pending.items():
            table.add_row(
                str(item_id),
                str(refs.location_id) if refs.location_id else "-",
                str(refs.category_id) if refs.category_id else "-",
            )
        self._console.print(table)

    def print_config_summary(self, config_path: str, store_path: str, feed_path: str) -> None:
        """Print configuration summary."""
        self._console.print(
            Panel(
                f"Config: {config_path}\nStore:  {store_path}\nFeed:   {feed_path}",
                title="invsync Configuration",
                border_style="blue",
            )
        )


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
