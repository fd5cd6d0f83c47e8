"""
Rendu Rich des resultats du catalogue, des sous-titres et de la maintenance.
"""

from rich.panel import Panel
from rich.table import Table

from dynamic_library.core.entities.catalog import CatalogItem, CatalogItemDetails
from dynamic_library.core.entities.subtitle import FetchedSubtitle
from dynamic_library.services.maintenance import ApiHealthReport, CacheCleanupReport

# Nombre d'episodes affiches par defaut dans les details d'une serie
EPISODES_PREVIEW = 10


def _or_dash(value: object) -> str:
    return "-" if value is None or value == "" else str(value)


def items_table(items: list[CatalogItem], title: str) -> Table:
    """Tableau des resultats d'une recherche."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Note", justify="right")
    table.add_column("IMDb", style="dim")

    for index, item in enumerate(items, start=1):
        name = item.name
        if item.original_name:
            name = f"{name} [dim]({item.original_name})[/dim]"
        rating = f"{item.rating:.1f}" if item.rating is not None else None
        table.add_row(
            str(index),
            item.id,
            name,
            _or_dash(item.year),
            _or_dash(rating),
            _or_dash(item.imdb_id),
        )
    return table


def details_panel(details: CatalogItemDetails) -> Panel:
    """Fiche detaillee d'un film ou d'une serie."""
    lines = [f"[bold]{details.name}[/bold]"]
    if details.original_name:
        lines.append(f"[dim]Titre original :[/dim] {details.original_name}")
    lines.append(f"[dim]Source :[/dim] {details.source.value} / {details.id}")

    facts = {
        "Annee": details.year,
        "Sortie": details.release_date.isoformat() if details.release_date else None,
        "Duree": f"{details.runtime_minutes} min" if details.runtime_minutes else None,
        "Note": f"{details.rating:.1f}" if details.rating is not None else None,
        "Statut": details.status,
        "IMDb": details.imdb_id,
        "TMDB": details.tmdb_id,
        "TVDB": details.tvdb_id,
        "Langue": details.original_language,
        "Genres": ", ".join(details.genres),
        "Realisation": ", ".join(details.directors),
        "Studios": ", ".join(details.studios),
        "Pays": ", ".join(details.countries),
    }
    for label, value in facts.items():
        if value:
            lines.append(f"[dim]{label} :[/dim] {value}")

    if details.tagline:
        lines.append(f"\n[italic]{details.tagline}[/italic]")
    if details.overview:
        lines.append(f"\n{details.overview}")
    if details.cast:
        cast = ", ".join(
            f"{m.name} ({m.character})" if m.character else m.name for m in details.cast[:8]
        )
        lines.append(f"\n[dim]Casting :[/dim] {cast}")

    return Panel("\n".join(lines), title=details.type.value, border_style="cyan")


def seasons_table(details: CatalogItemDetails) -> Table:
    """Tableau des saisons d'une serie."""
    table = Table(title="Saisons")
    table.add_column("Saison", justify="right")
    table.add_column("Nom")
    table.add_column("Episodes", justify="right")
    for season in details.seasons:
        table.add_row(str(season.number), _or_dash(season.name), str(season.episode_count))
    return table


def episodes_table(details: CatalogItemDetails, limit: int | None = EPISODES_PREVIEW) -> Table:
    """Tableau des episodes d'une serie (les premiers seulement si limit)."""
    episodes = details.episodes if limit is None else details.episodes[:limit]
    table = Table(title=f"Episodes ({len(episodes)}/{len(details.episodes)})")
    table.add_column("S", justify="right")
    table.add_column("E", justify="right")
    table.add_column("Titre")
    table.add_column("Diffusion")
    for episode in episodes:
        table.add_row(
            str(episode.season_number),
            str(episode.episode_number),
            episode.name,
            _or_dash(episode.air_date.isoformat() if episode.air_date else None),
        )
    return table


def subtitles_table(subtitles: list[FetchedSubtitle]) -> Table:
    """Tableau des sous-titres recuperes."""
    table = Table(title="Sous-titres")
    table.add_column("Langue")
    table.add_column("Code", style="cyan")
    table.add_column("SDH", justify="center")
    table.add_column("Fichier", justify="right", style="dim")
    table.add_column("Taille", justify="right")
    for subtitle in subtitles:
        table.add_row(
            subtitle.language,
            subtitle.language_code,
            "oui" if subtitle.hearing_impaired else "",
            _or_dash(subtitle.file_id),
            f"{len(subtitle.content)} car.",
        )
    return table


def health_table(reports: list[ApiHealthReport]) -> Table:
    """Tableau de l'etat des sources."""
    table = Table(title="Etat des API")
    table.add_column("Source")
    table.add_column("Etat")
    table.add_column("Detail", style="dim")
    for report in reports:
        state = "[green]OK[/green]" if report.healthy else "[red]ECHEC[/red]"
        table.add_row(report.source, state, _or_dash(report.detail))
    return table


def cleanup_summary(report: CacheCleanupReport) -> str:
    """Resume d'un compactage du cache."""
    return (
        f"[bold]{report.removed}[/bold] entree(s) supprimee(s) "
        f"({report.entries_before} -> {report.entries_after})"
    )
