"""
Commandes CLI de Dynamic Library.

Chaque commande synchrone delegue a une implementation async executee
via asyncio.run().
"""

from .catalog_commands import movie, search_movies, search_series, series
from .maintenance_commands import cache_cleanup, health_check
from .subtitle_commands import convert_subtitle, subtitles_episode, subtitles_movie

__all__ = [
    "cache_cleanup",
    "convert_subtitle",
    "health_check",
    "movie",
    "search_movies",
    "search_series",
    "series",
    "subtitles_episode",
    "subtitles_movie",
]
