"""
Point d'entrée CLI de Dynamic Library.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    cache_cleanup,
    convert_subtitle,
    health_check,
    movie,
    search_movies,
    search_series,
    series,
    subtitles_episode,
    subtitles_movie,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, verbosity_to_level

app = typer.Typer(
    name="dynlib",
    help="Agrégation de métadonnées films/séries (TMDB, TVDB, addons Stremio) et sous-titres",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


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
    """Dynamic Library - métadonnées et sous-titres depuis des sources externes."""
    state["verbose"] = 0 if quiet else verbose
    state["quiet"] = quiet
    if verbose or quiet:
        settings = get_config()
        configure_logging(
            log_level=verbosity_to_level(verbose, quiet),
            log_file=settings.log_file,
            rotation_size=settings.log_rotation_size,
            retention_count=settings.log_retention_count,
        )


# Catalogue
app.command(name="search-movies")(search_movies)
app.command(name="search-series")(search_series)
app.command()(movie)
app.command()(series)

# Sous-titres
app.command(name="subtitles-movie")(subtitles_movie)
app.command(name="subtitles-episode")(subtitles_episode)
app.command(name="convert-subtitle")(convert_subtitle)

# Maintenance
app.command(name="cache-cleanup")(cache_cleanup)
app.command(name="health-check")(health_check)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Dynamic Library")
    typer.echo(f"Fournisseur de catalogue : {config.catalog_provider.value}")
    typer.echo(f"Source films : {config.movie_api_source.value}")
    typer.echo(f"Source séries : {config.tv_show_api_source.value}")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"API TVDB : {'activée' if config.tvdb_enabled else 'désactivée'}")
    typer.echo(f"Addon Stremio : {config.stremio_catalog_url or 'non configuré'}")
    typer.echo(
        f"OpenSubtitles : {'activé' if config.opensubtitles_api_key else 'désactivé'}"
        f" (langues : {', '.join(config.subtitle_language_list)})"
    )
    typer.echo(f"Langue : {config.language_mode.value} ({config.language_override_code})")
    typer.echo(f"Cache : {config.cache_dir} (TTL {config.cache_ttl_minutes} min)")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Dynamic Library v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de Dynamic Library", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
