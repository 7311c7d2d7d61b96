"""Typer CLI root application."""

import typer

from address_registry.core.config import get_settings
from address_registry.core.logging import setup_logging

app = typer.Typer(name="address-registry", help="Administrative region and address registry CLI")


@app.callback()
def _main_callback() -> None:
    """Initialize logging for all CLI commands."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)


def _register_subcommands() -> None:
    """Register all CLI subcommand groups."""
    from address_registry.cli.db_cmd import db_app
    from address_registry.cli.import_cmd import import_app
    from address_registry.cli.region_cmd import region_app

    app.add_typer(db_app, name="db", help="Database migration commands")
    app.add_typer(import_app, name="import", help="Region and address import commands")
    app.add_typer(region_app, name="regions", help="Region lookup commands")


_register_subcommands()
