"""
Point d'entrée CLI de SeasonArt.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import images, refresh
from .config import Settings
from .logging_config import configure_logging, level_for_verbosity
from .utils.constants import PROVIDER_NAME, PROVIDER_ORDER, SUPPORTED_IMAGE_TYPES

app = typer.Typer(
    name="seasonart",
    help="Visuels de saison depuis fanart.tv",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """SeasonArt - Visuels de saison depuis fanart.tv."""
    settings = Settings()
    configure_logging(
        log_level=level_for_verbosity(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(images)
app.command()(refresh)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    logger.info("Configuration SeasonArt")
    typer.echo(f"Fournisseur : {PROVIDER_NAME} (ordre {PROVIDER_ORDER})")
    typer.echo(f"Types : {', '.join(t.value for t in SUPPORTED_IMAGE_TYPES)}")
    typer.echo(f"API fanart.tv : {'activée' if config.fanart_enabled else 'désactivée'}")
    typer.echo(f"Cache : {config.cache_dir} ({config.cache_ttl_days} jours)")
    typer.echo(f"Langue par défaut : {config.default_language}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"SeasonArt v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
