"""
Commandes CLI de resolution des visuels de saison.

- images : affiche les visuels classes d'une saison (tableau Rich ou JSON)
- refresh : force le retelechargement du document fanart.tv d'une serie
"""

import asyncio
import json
from typing import Annotated, Optional

import httpx
import typer
from loguru import logger
from rich.table import Table

from seasonart.adapters.api.retry import RateLimitError
from seasonart.adapters.cli.helpers import console, suppress_loguru, with_container
from seasonart.core.exceptions import StoreError
from seasonart.core.ports.metadata_store import FetchStatus
from seasonart.core.value_objects.artwork import ImageCandidate, SeasonIdentity

# Erreurs d'infrastructure affichees sans trace
_FATAL_ERRORS = (httpx.HTTPError, RateLimitError, StoreError)


def _require_fanart(container) -> None:
    """Arrete la commande si la cle fanart.tv n'est pas configuree."""
    if not container.config().fanart_enabled:
        console.print(
            "[red]Cle API fanart.tv absente.[/red] "
            "Definir SEASONART_FANART_API_KEY."
        )
        raise typer.Exit(code=1)


def render_candidates_table(
    candidates: list[ImageCandidate], title: str
) -> Table:
    """Construit le tableau Rich des candidats, dans l'ordre de classement."""
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Taille", justify="right")
    table.add_column("Langue")
    table.add_column("Likes", justify="right")
    table.add_column("URL", overflow="fold")

    for rank, candidate in enumerate(candidates, start=1):
        table.add_row(
            str(rank),
            candidate.image_type.value,
            f"{candidate.width}x{candidate.height}",
            candidate.language or "-",
            "-" if candidate.community_rating is None else str(candidate.community_rating),
            candidate.url,
        )
    return table


def images(
    series_id: Annotated[str, typer.Argument(help="ID TVDB de la serie")],
    season: Annotated[int, typer.Argument(help="Numero de saison (0 = specials)")],
    lang: Annotated[
        Optional[str],
        typer.Option("--lang", "-l", help="Langue preferee (defaut: configuration)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON au lieu du tableau"),
    ] = False,
) -> None:
    """Affiche les visuels classes d'une saison."""
    asyncio.run(_images_async(series_id, season, lang, as_json))


@with_container()
async def _images_async(
    container,
    series_id: str,
    season: int,
    lang: Optional[str],
    as_json: bool,
) -> None:
    """Implementation async de la commande images."""
    _require_fanart(container)
    language = lang or container.config().default_language
    identity = SeasonIdentity(
        series_id=series_id,
        season_index=season,
        preferred_language=language,
    )
    service = container.season_image_service()

    try:
        with suppress_loguru():
            candidates = await service.get_images(identity)
    except _FATAL_ERRORS as e:
        logger.error(f"Echec de la resolution des visuels de {series_id}: {e}")
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([c.to_dict() for c in candidates], indent=2))
        return

    if not candidates:
        console.print(
            f"[yellow]Aucun visuel pour la serie {series_id} saison {season}.[/yellow]"
        )
        return

    console.print(
        render_candidates_table(
            candidates,
            title=f"Serie {series_id} - saison {season} ({language})",
        )
    )


def refresh(
    series_id: Annotated[str, typer.Argument(help="ID TVDB de la serie")],
) -> None:
    """Retelecharge le document fanart.tv d'une serie."""
    asyncio.run(_refresh_async(series_id))


@with_container()
async def _refresh_async(container, series_id: str) -> None:
    """Implementation async de la commande refresh."""
    _require_fanart(container)
    store = container.metadata_store()

    try:
        status = await store.ensure_cached(series_id, force=True)
    except _FATAL_ERRORS as e:
        logger.error(f"Echec du rafraichissement de {series_id}: {e}")
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)

    if status is FetchStatus.NOT_FOUND:
        console.print(f"[yellow]Serie {series_id} inconnue de fanart.tv.[/yellow]")
        return

    logger.info(f"Document de la serie {series_id} rafraichi")
    console.print(f"[green]Document de la serie {series_id} mis a jour.[/green]")
