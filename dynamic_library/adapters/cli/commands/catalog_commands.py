"""
Commandes de recherche et de consultation du catalogue.

Commandes :
- search-movies / search-series : recherche par titre
- movie / series : fiche detaillee par identifiant natif du fournisseur
"""

import asyncio
from typing import Annotated, Optional

import typer

from dynamic_library.adapters.cli.display import (
    details_panel,
    episodes_table,
    items_table,
    seasons_table,
)
from dynamic_library.adapters.cli.helpers import (
    console,
    resolve_provider,
    suppress_loguru,
    with_container,
)
from dynamic_library.core.entities.catalog import CatalogContentType
from dynamic_library.core.value_objects.options import CatalogProviderKind

ProviderOption = Annotated[
    Optional[CatalogProviderKind],
    typer.Option(
        "--provider",
        "-p",
        help="Fournisseur a utiliser (defaut: DYNLIB_CATALOG_PROVIDER)",
        case_sensitive=False,
    ),
]

LimitOption = Annotated[
    Optional[int],
    typer.Option("--limit", "-n", min=1, help="Nombre maximum de resultats"),
]


def search_movies(
    query: Annotated[str, typer.Argument(help="Titre du film")],
    limit: LimitOption = None,
    provider: ProviderOption = None,
) -> None:
    """Recherche des films par titre."""
    asyncio.run(_search_async(query, CatalogContentType.MOVIE, limit, provider))


def search_series(
    query: Annotated[str, typer.Argument(help="Titre de la serie")],
    limit: LimitOption = None,
    provider: ProviderOption = None,
) -> None:
    """Recherche des series par titre."""
    asyncio.run(_search_async(query, CatalogContentType.SERIES, limit, provider))


@with_container()
async def _search_async(
    container,
    query: str,
    content_type: CatalogContentType,
    limit: Optional[int],
    kind: Optional[CatalogProviderKind],
) -> None:
    """Implementation async des recherches."""
    catalog = resolve_provider(container, kind)
    if not catalog.is_configured:
        console.print(f"[red]Fournisseur non configure:[/red] {catalog.provider_name}")
        raise typer.Exit(1)

    max_results = limit or container.config().max_search_results
    if content_type is CatalogContentType.MOVIE:
        items = await catalog.search_movies(query, max_results)
    else:
        items = await catalog.search_series(query, max_results)

    with suppress_loguru():
        if not items:
            console.print(f"[yellow]Aucun resultat pour '{query}'.[/yellow]")
            return
        console.print(items_table(items, f"{catalog.provider_name} - '{query}'"))


def movie(
    item_id: Annotated[str, typer.Argument(help="Identifiant du film chez le fournisseur")],
    provider: ProviderOption = None,
) -> None:
    """Affiche la fiche detaillee d'un film."""
    asyncio.run(_details_async(item_id, CatalogContentType.MOVIE, provider, False))


def series(
    item_id: Annotated[str, typer.Argument(help="Identifiant de la serie chez le fournisseur")],
    provider: ProviderOption = None,
    all_episodes: Annotated[
        bool,
        typer.Option("--all-episodes", help="Afficher tous les episodes"),
    ] = False,
) -> None:
    """Affiche la fiche detaillee d'une serie (saisons et episodes)."""
    asyncio.run(_details_async(item_id, CatalogContentType.SERIES, provider, all_episodes))


@with_container()
async def _details_async(
    container,
    item_id: str,
    content_type: CatalogContentType,
    kind: Optional[CatalogProviderKind],
    all_episodes: bool,
) -> None:
    """Implementation async des fiches detaillees."""
    catalog = resolve_provider(container, kind)
    if not catalog.is_configured:
        console.print(f"[red]Fournisseur non configure:[/red] {catalog.provider_name}")
        raise typer.Exit(1)

    if content_type is CatalogContentType.MOVIE:
        details = await catalog.get_movie_details(item_id)
    else:
        details = await catalog.get_series_details(item_id)

    with suppress_loguru():
        if details is None:
            console.print(f"[yellow]Introuvable:[/yellow] {item_id}")
            raise typer.Exit(1)

        console.print(details_panel(details))
        if details.seasons:
            console.print(seasons_table(details))
        if details.episodes:
            console.print(episodes_table(details, None if all_episodes else 10))
