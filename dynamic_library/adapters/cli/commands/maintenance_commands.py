"""
Commandes de maintenance : compactage du cache et verification des API.
"""

import asyncio

import typer

from dynamic_library.adapters.cli.display import cleanup_summary, health_table
from dynamic_library.adapters.cli.helpers import console, suppress_loguru, with_container


def cache_cleanup() -> None:
    """Compacte le cache des reponses (environ 25% des entrees)."""
    asyncio.run(_cache_cleanup_async())


@with_container()
async def _cache_cleanup_async(container) -> None:
    """Implementation async de cache-cleanup."""
    report = await container.maintenance_service().cleanup_cache()
    with suppress_loguru():
        console.print(cleanup_summary(report))


def health_check() -> None:
    """Verifie que les sources de metadonnees configurees repondent."""
    asyncio.run(_health_check_async())


@with_container()
async def _health_check_async(container) -> None:
    """Implementation async de health-check."""
    reports = await container.maintenance_service().check_api_health()
    with suppress_loguru():
        if not reports:
            console.print("[yellow]Aucune source TMDB/TVDB configuree.[/yellow]")
            return
        console.print(health_table(reports))

    if not all(report.healthy for report in reports):
        raise typer.Exit(1)
