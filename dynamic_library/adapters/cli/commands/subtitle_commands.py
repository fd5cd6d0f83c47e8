"""
Commandes de sous-titres.

Commandes :
- subtitles-movie / subtitles-episode : recherche et telechargement OpenSubtitles
- convert-subtitle : conversion d'un fichier SRT en WebVTT ou en evenements JSON
"""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer

from dynamic_library.adapters.cli.display import subtitles_table
from dynamic_library.adapters.cli.helpers import console, suppress_loguru, with_container
from dynamic_library.core.entities.subtitle import FetchedSubtitle
from dynamic_library.services.subtitle_converter import convert, events_to_json, parse_cues


class SubtitleFormat(str, Enum):
    """Format de sortie de convert-subtitle."""

    VTT = "vtt"
    JSON = "json"


OutputDirOption = Annotated[
    Optional[Path],
    typer.Option("--output-dir", "-o", help="Repertoire ou ecrire les fichiers .vtt"),
]


def subtitles_movie(
    imdb_id: Annotated[str, typer.Argument(help="Identifiant IMDb du film (tt...)")],
    output_dir: OutputDirOption = None,
) -> None:
    """Recupere les sous-titres d'un film dans les langues configurees."""
    asyncio.run(_subtitles_async(imdb_id, None, None, output_dir))


def subtitles_episode(
    imdb_id: Annotated[str, typer.Argument(help="Identifiant IMDb de la serie (tt...)")],
    season: Annotated[int, typer.Argument(min=0, help="Numero de saison")],
    episode: Annotated[int, typer.Argument(min=0, help="Numero d'episode")],
    output_dir: OutputDirOption = None,
) -> None:
    """Recupere les sous-titres d'un episode dans les langues configurees."""
    asyncio.run(_subtitles_async(imdb_id, season, episode, output_dir))


@with_container()
async def _subtitles_async(
    container,
    imdb_id: str,
    season: Optional[int],
    episode: Optional[int],
    output_dir: Optional[Path],
) -> None:
    """Implementation async des commandes de sous-titres."""
    service = container.subtitle_service()
    if not service.is_enabled:
        console.print(
            "[yellow]Sous-titres desactives ou OpenSubtitles non configure "
            "(DYNLIB_OPENSUBTITLES_API_KEY).[/yellow]"
        )
        return

    if season is None or episode is None:
        subtitles = await service.fetch_movie_subtitles(imdb_id)
        stem = imdb_id
    else:
        subtitles = await service.fetch_episode_subtitles(imdb_id, season, episode)
        stem = f"{imdb_id}.S{season:02d}E{episode:02d}"

    with suppress_loguru():
        if not subtitles:
            console.print("[yellow]Aucun sous-titre trouve.[/yellow]")
            return
        console.print(subtitles_table(subtitles))

    if output_dir is not None:
        for path in write_subtitles(subtitles, output_dir, stem):
            console.print(f"[green]Ecrit:[/green] {path}")


def write_subtitles(
    subtitles: list[FetchedSubtitle], output_dir: Path, stem: str
) -> list[Path]:
    """Ecrit chaque sous-titre dans {stem}.{code}.vtt et retourne les chemins."""
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for subtitle in subtitles:
        path = output_dir / f"{stem}.{subtitle.language_code}.vtt"
        path.write_text(subtitle.content, encoding="utf-8")
        paths.append(path)
    return paths


def convert_subtitle(
    source: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True, help="Fichier SRT ou WebVTT"),
    ],
    output_format: Annotated[
        SubtitleFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Format de sortie"),
    ] = SubtitleFormat.VTT,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier de sortie (defaut: sortie standard)"),
    ] = None,
) -> None:
    """Convertit un sous-titre en WebVTT ou en evenements JSON."""
    text = source.read_text(encoding="utf-8-sig", errors="replace")
    if output_format is SubtitleFormat.JSON:
        result = events_to_json(parse_cues(text), indent=2)
    else:
        result = convert(text)

    if output is None:
        typer.echo(result)
        return
    output.write_text(result, encoding="utf-8")
    console.print(f"[green]Ecrit:[/green] {output}")
