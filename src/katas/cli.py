"""
Katas Command Line Interface.

Runs the katas against local stand-in collaborators so their
behavior can be explored by hand.
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from katas.config import (
    ConfigurationError,
    ConfigLoader,
    KatasConfig,
    LoggingConfig,
)
from katas.guardrails import Order, OrderService
from katas.models.base import DataFormat, OrderMessage, ProcessingStatus, StorageResult
from katas.templatemethod import DataProcessor, DataStorage
from katas.version import __version__

console = Console()

logger = logging.getLogger(__name__)


class _FlagOrderService(OrderService):
    """Order service whose check results come from CLI flags."""

    def __init__(self, payment_ok: bool, in_stock: bool, address_ok: bool) -> None:
        self.payment_ok = payment_ok
        self.in_stock = in_stock
        self.address_ok = address_ok
        self.finalized = 0

    def is_payment_method_valid(self, order: Order) -> bool:
        return self.payment_ok

    def are_items_in_stock(self, order: Order) -> bool:
        return self.in_stock

    def is_shipping_address_valid(self, order: Order) -> bool:
        return self.address_ok

    def finalize_order(self, order: Order) -> None:
        self.finalized += 1


class _RecordingStorage(DataStorage):
    """Storage that keeps payloads in memory and returns a fixed result."""

    def __init__(self, result: StorageResult) -> None:
        self.result = result
        self.stored: list[str] = []

    def store_data(self, data: str) -> StorageResult:
        self.stored.append(data)
        return self.result


def _configure_logging(logging_config: LoggingConfig, verbose: bool) -> None:
    """Configure root logging from settings.

    Args:
        logging_config: Logging settings
        verbose: Lower the level to at least INFO
    """
    level = logging.getLevelName(logging_config.level.value)
    if verbose:
        level = min(level, logging.INFO)

    # basicConfig is a no-op once the root logger has handlers
    if not logging.getLogger().handlers:
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if logging_config.file:
            handlers.append(logging.FileHandler(logging_config.file))

        logging.basicConfig(
            level=level,
            format=logging_config.format,
            handlers=handlers,
        )
    logging.getLogger("katas").setLevel(level)


def _load_settings(config_path: str | None) -> tuple[KatasConfig, Path | None]:
    """Load configuration, falling back to defaults when no file exists.

    Returns:
        Settings and the file they were read from (None for defaults)
    """
    loader = ConfigLoader(config_path)
    if config_path:
        return loader.load(), loader.loaded_from_path
    try:
        return loader.load_from_env(), loader.loaded_from_path
    except FileNotFoundError:
        return ConfigLoader().load(), None


@click.group()
@click.version_option(version=__version__, prog_name="katas")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """Katas: guard clause and template method exercises."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path

    try:
        settings, source = _load_settings(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)

    ctx.obj["settings"] = settings
    ctx.obj["config_source"] = source
    _configure_logging(settings.logging, verbose or settings.debug)


@main.command()
@click.option("--invalid-payment", is_flag=True, help="Fail the payment check")
@click.option("--out-of-stock", is_flag=True, help="Fail the stock check")
@click.option("--invalid-address", is_flag=True, help="Fail the shipping address check")
def order(invalid_payment: bool, out_of_stock: bool, invalid_address: bool) -> None:
    """Process an order whose checks are driven by flags."""
    service = _FlagOrderService(
        payment_ok=not invalid_payment,
        in_stock=not out_of_stock,
        address_ok=not invalid_address,
    )
    message = Order(service).process_order()

    style = "green" if message == OrderMessage.SUCCESS.value else "red"
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Result", f"[{style}]{message}[/{style}]")
    table.add_row("Finalized", str(service.finalized))
    console.print(Panel(table, title="Order"))


@main.command()
@click.argument(
    "data_format",
    type=click.Choice([fmt.value for fmt in DataFormat], case_sensitive=False),
)
@click.argument("data")
@click.option("--storage-fails", is_flag=True, help="Make the storage step fail")
@click.pass_context
def process(ctx: click.Context, data_format: str, data: str, storage_fails: bool) -> None:
    """Run DATA through the pipeline for DATA_FORMAT (csv or json).

    Put -- before DATA that starts with a dash:

    \b
        katas process csv -- -1,2
    """
    settings: KatasConfig = ctx.obj["settings"]
    storage = _RecordingStorage(StorageResult.FAILURE if storage_fails else StorageResult.SUCCESS)
    processor = DataProcessor(storage, failure_marker=settings.processing.failure_marker)

    status = processor.process_data(data, data_format.lower())
    logger.debug(f"Processed {data_format} payload: {status.value}")

    style = "green" if status == ProcessingStatus.SUCCESS else "red"
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Format", data_format.lower())
    table.add_row("Status", f"[{style}]{status.name}[/{style}]")
    table.add_row("Stored", escape(storage.stored[0]) if storage.stored else "-")
    console.print(Panel(table, title="Processing"))


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Display current configuration."""
    settings: KatasConfig = ctx.obj["settings"]
    source = ctx.obj["config_source"]

    console.print(Panel("[bold blue]Katas Configuration[/bold blue]", title="Configuration"))

    console.print("[bold]Logging[/bold]")
    console.print(f"  Level: {settings.logging.level.value}")
    console.print(f"  File: {settings.logging.file or '-'}")
    console.print()

    console.print("[bold]Processing[/bold]")
    console.print(f"  Failure Marker: {escape(settings.processing.failure_marker)}")
    console.print()

    console.print(f"Source: {escape(str(source)) if source else 'defaults'}", soft_wrap=True)
    console.print(f"Debug: {settings.debug}")


if __name__ == "__main__":
    main()
