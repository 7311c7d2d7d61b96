"""Region lookup CLI commands."""

import typer

region_app = typer.Typer()


@region_app.command("show")
def show_region(
    region_id: int | None = typer.Argument(None, help="Region id (defaults to the root)"),
) -> None:
    """Show a region and its direct children."""
    from address_registry.core.config import get_settings
    from address_registry.core.database import dispose_engine
    from address_registry.services.region_cache import UninitializedStateError
    from address_registry.services.registry import create_registry

    registry = create_registry(get_settings())
    try:
        region = registry.root_region() if region_id is None else registry.get_region(region_id)
    except UninitializedStateError as exc:
        typer.echo(f"Error: {exc}. Run 'import regions' first.", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        dispose_engine()

    if region is None:
        typer.echo(f"Region {region_id} not found", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{region.name} (id={region.id}, type={region.type}, parent={region.parent_id})")
    for child in region.children:
        typer.echo(f"  {child.id:>8}  {child.name}  [{child.type}]")
