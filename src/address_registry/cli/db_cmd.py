"""Database migration CLI commands using Alembic programmatically."""

from pathlib import Path
from typing import TYPE_CHECKING

import typer
from loguru import logger

if TYPE_CHECKING:
    from alembic.config import Config

db_app = typer.Typer()

# src/address_registry/cli/db_cmd.py -> project root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def find_alembic_ini(config_path: Path | None = None) -> Path:
    """Locate the Alembic configuration file.

    An explicit path wins; otherwise ``alembic.ini`` in the working directory,
    then the one at the project root.

    Raises:
        FileNotFoundError: If no configuration file exists.
    """
    candidates = [config_path] if config_path is not None else [Path("alembic.ini"), _PROJECT_ROOT / "alembic.ini"]
    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    msg = f"alembic.ini not found (looked in {', '.join(str(c) for c in candidates)})"
    raise FileNotFoundError(msg)


def _alembic_config(config_path: Path | None) -> "Config":
    from alembic.config import Config

    from address_registry.core.config import get_settings

    try:
        ini_path = find_alembic_ini(config_path)
    except FileNotFoundError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    config = Config(str(ini_path))
    # Resolve the script directory against the ini file, not the working directory
    script_location = config.get_main_option("script_location") or "alembic"
    config.set_main_option("script_location", str(ini_path.parent / script_location))
    logger.debug(f"Using {ini_path} against {get_settings().database_url.split('@')[-1]}")
    return config


_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to alembic.ini")


@db_app.command()
def upgrade(
    revision: str = typer.Argument("head", help="Target revision"),
    config_path: Path | None = _CONFIG_OPTION,
) -> None:
    """Create or migrate the regions and addresses tables up to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Upgrading address registry schema to {revision}")
    command.upgrade(config, revision)
    logger.info("Address registry schema upgrade complete")


@db_app.command()
def downgrade(
    revision: str = typer.Argument("-1", help="Target revision"),
    config_path: Path | None = _CONFIG_OPTION,
) -> None:
    """Roll the schema back to the target revision."""
    from alembic import command

    config = _alembic_config(config_path)
    logger.info(f"Downgrading address registry schema to {revision}")
    command.downgrade(config, revision)
    logger.info("Address registry schema downgrade complete")


@db_app.command()
def current(
    config_path: Path | None = _CONFIG_OPTION,
) -> None:
    """Show the current schema revision."""
    from alembic import command

    command.current(_alembic_config(config_path), verbose=True)
