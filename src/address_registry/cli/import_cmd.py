"""Import CLI commands for region trees and address files."""

from pathlib import Path

import typer

import_app = typer.Typer()


@import_app.command("regions")
def import_regions(
    file: Path = typer.Argument(..., help="Path to region tree JSON file", exists=True),  # noqa: B008
) -> None:
    """Import the administrative region tree from a JSON file."""
    from address_registry.core.config import get_settings
    from address_registry.core.database import dispose_engine
    from address_registry.lib.regions import load_region_tree
    from address_registry.services.registry import create_registry

    try:
        tree = load_region_tree(file)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    registry = create_registry(get_settings())
    try:
        count = registry.import_regions(tree)
    finally:
        dispose_engine()

    if count == 0:
        typer.echo("No regions imported (unexpected root name or tree already imported)")
        raise typer.Exit(code=1)
    typer.echo(f"Imported {count} regions")


@import_app.command("addresses")
def import_addresses(
    file: Path = typer.Argument(..., help="Path to address CSV file", exists=True),  # noqa: B008
    batch_size: int | None = typer.Option(None, "--batch-size", min=1, help="Addresses per store write batch"),  # noqa: B008
) -> None:
    """Import pre-split addresses from a CSV file, skipping duplicates."""
    from address_registry.core.config import get_settings
    from address_registry.core.database import dispose_engine
    from address_registry.lib.addresses import parse_address_chunks
    from address_registry.lib.stores.base import StoreError
    from address_registry.services.registry import create_registry

    settings = get_settings()
    if batch_size is not None:
        settings.import_batch_size = batch_size

    registry = create_registry(settings)
    typer.echo(f"Processing {file}...")
    try:
        for chunk in parse_address_chunks(file, batch_size=settings.import_batch_size):
            registry.import_addresses(chunk)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except StoreError as exc:
        counters = registry.import_counters
        typer.echo(f"Error: {exc}", err=True)
        typer.echo(f"Import aborted after {counters.imported} persisted addresses", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        dispose_engine()

    counters = registry.import_counters
    typer.echo("\nImport completed:")
    typer.echo(f"  Imported:    {counters.imported}")
    typer.echo(f"  Duplicates:  {counters.duplicates}")
    typer.echo(f"  Failed:      {counters.failed}")
    typer.echo(f"  Store time:  {counters.store_seconds:.3f}s")
