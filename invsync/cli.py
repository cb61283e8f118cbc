"""Click-based CLI for invsync - read-only inventory cloud sync."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console as RichConsole
from rich.logging import RichHandler

from invsync import __version__
from invsync.config import (
    InvsyncConfig,
    ensure_config_exists,
    get_config_path,
    load_or_default,
    validate_config_file,
)
from invsync.output import Console, create_console
from invsync.sources import FeedChangeSource
from invsync.store import YamlEntityStore
from invsync.sync import ReconciliationEngine, SyncState, SyncStateMachine, SyncStatus

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _config_path(ctx: click.Context) -> Path:
    return ctx.obj.get("config_path") or get_config_path()


def _load(ctx: click.Context, console: Console) -> InvsyncConfig:
    """Load configuration, exiting with an error message if it is invalid."""
    try:
        return load_or_default(_config_path(ctx))
    except (ValueError, yaml.YAMLError) as e:
        console.print_error(f"Invalid configuration: {e}")
        sys.exit(1)


def _setup_logging(config: InvsyncConfig, verbose: bool) -> None:
    """Send warnings (or everything when verbose) to stderr and, if configured, to the log file."""
    root = logging.getLogger("invsync")
    root.handlers.clear()
    root.setLevel(logging.DEBUG)

    stream = RichHandler(console=RichConsole(stderr=True), show_time=False, show_path=False)
    stream.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(stream)

    if config.output.log_file:
        log_path = Path(config.output.log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            root.warning("Cannot open log file %s: %s", log_path, e)
        else:
            file_handler.setLevel(config.output.log_level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)


def _build_machine(
    config: InvsyncConfig,
    *,
    store_path: Optional[Path] = None,
    feed_path: Optional[Path] = None,
    interval: Optional[float] = None,
) -> SyncStateMachine:
    """Wire store, feed source, engine and state machine from configuration."""
    store = YamlEntityStore(store_path or Path(config.store.path))
    source = FeedChangeSource(feed_path or Path(config.sync.feed_path), Path(config.sync.cursor_path))
    engine = ReconciliationEngine(source, store, zones=config.cloud.zones)
    return SyncStateMachine(
        engine,
        interval=interval or config.sync.interval_seconds,
        auto_sync=config.sync.auto_sync,
    )


@click.group()
@click.version_option(version=__version__, prog_name="invsync")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/invsync/config.yaml or $INVSYNC_CONFIG)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]) -> None:
    """invsync - Read-only cloud sync for the personal inventory.

    Fetches item, location and category changes from the cloud change feed
    and merges them into the local inventory. Nothing is ever uploaded.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.option("--feed", "feed_path", type=click.Path(path_type=Path), help="Override change feed path")
@click.option("--store", "store_path", type=click.Path(path_type=Path), help="Override local inventory path")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.pass_context
def sync(ctx: click.Context, feed_path: Optional[Path], store_path: Optional[Path], verbose: bool) -> None:
    """Run one manual sync pass."""
    console = create_console(verbose=verbose)
    config = _load(ctx, console)
    verbose = verbose or config.output.verbose
    console = create_console(verbose=verbose, colored=config.output.colored)
    _setup_logging(config, verbose)

    machine = _build_machine(config, store_path=store_path, feed_path=feed_path)

    async def _run() -> SyncState:
        await machine.refresh_account_status()
        return await machine.manual_sync()

    state = asyncio.run(_run())
    console.print_state(state, machine.last_sync)

    if state.status is SyncStatus.ERROR:
        sys.exit(1)

    if machine.last_result is not None:
        console.print_pass_result(machine.last_result)
    if verbose:
        console.print_pending(machine.engine.tracker)


@cli.command()
@click.option("--interval", "-i", type=click.FloatRange(min=1.0), help="Seconds between automatic passes")
@click.option("--feed", "feed_path", type=click.Path(path_type=Path), help="Override change feed path")
@click.option("--store", "store_path", type=click.Path(path_type=Path), help="Override local inventory path")
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.pass_context
def watch(
    ctx: click.Context,
    interval: Optional[float],
    feed_path: Optional[Path],
    store_path: Optional[Path],
    verbose: bool,
) -> None:
    """Sync automatically on a fixed interval until interrupted.

    Failures of automatic passes are only written to the log.
    """
    console = create_console(verbose=verbose)
    config = _load(ctx, console)
    verbose = verbose or config.output.verbose
    console = create_console(verbose=verbose, colored=config.output.colored)
    _setup_logging(config, verbose)

    machine = _build_machine(config, store_path=store_path, feed_path=feed_path, interval=interval)
    machine.auto_sync_enabled = True
    machine.add_listener(lambda state: console.print_state(state, machine.last_sync))

    async def _run() -> None:
        await machine.start()
        if not machine.is_account_available:
            console.print_warning("Cloud account is not available; waiting for it")
        await machine.auto_sync()
        try:
            # The feed has no account events, so poll its status while signed out
            while True:
                await asyncio.sleep(machine.interval)
                if not machine.is_account_available:
                    await machine.refresh_account_status()
        finally:
            await machine.stop()

    console.print_info(f"Watching for changes every {machine.interval:.0f}s (Ctrl-C to stop)")
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print_info("Stopped")


@cli.command()
@click.option("--store", "store_path", type=click.Path(path_type=Path), help="Override local inventory path")
@click.option("--verbose", "-v", is_flag=True, help="Show ids")
@click.pass_context
def status(ctx: click.Context, store_path: Optional[Path], verbose: bool) -> None:
    """Show the local inventory."""
    console = create_console(verbose=verbose)
    config = _load(ctx, console)
    console = create_console(verbose=verbose, colored=config.output.colored)

    store = YamlEntityStore(store_path or Path(config.store.path))
    console.print_inventory(store)


@cli.group()
def config() -> None:
    """Manage invsync configuration."""


@config.command("init")
@click.pass_context
def config_init(ctx: click.Context) -> None:
    """Create a default configuration file if none exists."""
    console = create_console()
    path, created = ensure_config_exists(_config_path(ctx))
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_info(f"Configuration already exists: {path}")


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    console = create_console()
    loaded = _load(ctx, console)
    console.print_config_summary(str(_config_path(ctx)), loaded.store.path, loaded.sync.feed_path)
    console.print(yaml.dump(loaded.model_dump(mode="json"), default_flow_style=False, sort_keys=False))


@config.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate the configuration file."""
    console = create_console()
    valid, errors = validate_config_file(_config_path(ctx))
    if valid:
        console.print_success("Configuration is valid")
        return
    for error in errors:
        console.print_error(error)
    sys.exit(1)


if __name__ == "__main__":
    cli()
