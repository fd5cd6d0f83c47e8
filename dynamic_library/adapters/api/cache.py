"""
Cache persistant des reponses des sources externes, avec TTL par entree.

Le cache utilise diskcache pour la persistence sur disque, ce qui permet
de conserver les donnees entre les redemarrages de l'application.

Une entree peut contenir un resultat negatif explicite (valeur None) :
get() retourne alors (None, True), ce qui doit court-circuiter un nouvel
appel reseau exactement comme un hit positif. Une cle absente ou expiree
retourne (None, False).

TTL:
- Chaque appel fournit son TTL (configuration : cache_ttl_minutes, 60 par defaut)
- Contenu des sous-titres (SUBTITLE_CONTENT_TTL) : 24 heures, le texte publie ne change pas
"""

import asyncio
from functools import partial
from itertools import islice
from typing import Any, Awaitable, Callable, Optional, TypeVar

from diskcache import Cache
from loguru import logger

from dynamic_library.core.value_objects.lookup import Lookup

T = TypeVar("T")

# Sentinelle distinguant une cle absente d'une valeur None stockee
_MISSING = object()


class APICache:
    """
    Cache asynchrone avec TTL et cache negatif pour les appels API.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes. Les ecritures concurrentes
    sur une meme cle suivent la regle "dernier ecrivain gagnant".

    Attributes:
        DEFAULT_TTL: Duree de vie par defaut (60 minutes)
        SUBTITLE_CONTENT_TTL: Duree de vie du contenu des sous-titres (24h)

    Example:
        cache = APICache(cache_dir=".cache/api")
        await cache.set("tmdb:movie:603", details, ttl=3600)
        value, found = await cache.get("tmdb:movie:603")
    """

    DEFAULT_TTL = 60 * 60  # 60 minutes en secondes
    SUBTITLE_CONTENT_TTL = 24 * 60 * 60  # 24 heures en secondes (86400)

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    async def get(self, key: str) -> tuple[Optional[Any], bool]:
        """
        Recupere une valeur du cache.

        Args:
            key: Cle unique identifiant la donnee

        Returns:
            Tuple (valeur, trouve). (None, True) est un resultat negatif
            mis en cache, (None, False) une absence ou une expiration.
        """
        loop = asyncio.get_running_loop()
        value = await loop.run_in_executor(
            None, partial(self._cache.get, key, default=_MISSING)
        )
        if value is _MISSING:
            return None, False
        return value, True

    async def set(self, key: str, value: Any, ttl: float) -> None:
        """
        Stocke une valeur dans le cache avec un TTL.

        Args:
            key: Cle unique identifiant la donnee
            value: Valeur a stocker (serializable), None pour un resultat negatif
            ttl: Duree de vie en secondes
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_negative(self, key: str, ttl: float) -> None:
        """
        Enregistre un resultat negatif definitif (ex: 404, pas de traduction).

        Args:
            key: Cle unique identifiant la recherche
            ttl: Duree de vie en secondes
        """
        await self.set(key, None, ttl)

    async def count(self) -> int:
        """Retourne le nombre d'entrees presentes (expirees incluses jusqu'a purge)."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, len, self._cache)

    async def compact(self, fraction: float = 0.25) -> int:
        """
        Supprime proactivement une fraction approximative des entrees.

        Purge d'abord les entrees expirees, puis supprime les plus anciennes
        jusqu'a atteindre la fraction demandee. Sans effet sur la correction :
        un miss degrade toujours vers un nouvel appel a la source.

        Args:
            fraction: Part des entrees a supprimer (0.0 a 1.0)

        Returns:
            Nombre d'entrees supprimees
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._compact_sync, fraction)

    def _compact_sync(self, fraction: float) -> int:
        before = len(self._cache)
        if before == 0:
            return 0

        expired = self._cache.expire()
        target = int(before * max(0.0, min(fraction, 1.0)))
        remaining = max(0, target - expired)

        # Ordre de stockage : les entrees les plus anciennes d'abord
        for key in list(islice(iter(self._cache), remaining)):
            self._cache.delete(key)

        removed = before - len(self._cache)
        logger.debug(f"Cache compacte: {removed} entrees supprimees sur {before}")
        return removed

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()


async def cached_lookup(
    cache: APICache,
    key: str,
    ttl: float,
    fetch: Callable[[], Awaitable[Lookup[T]]],
) -> Lookup[T]:
    """
    Pattern cache-first commun a tous les clients.

    Un hit (positif ou negatif) court-circuite l'appel reseau. Sinon fetch()
    est execute une fois : un succes est stocke, un NOT_FOUND est stocke
    comme resultat negatif, les autres echecs ne sont jamais mis en cache.

    Args:
        cache: Cache des reponses
        key: Cle deja normalisee (prefixe de la source, parametres en minuscules)
        ttl: Duree de vie en secondes
        fetch: Coroutine realisant l'appel a la source

    Returns:
        Lookup issu du cache ou de la source
    """
    cached, found = await cache.get(key)
    if found:
        logger.debug(f"Cache hit: {key}")
        if cached is None:
            return Lookup.not_found(f"cached: {key}")
        return Lookup.ok(cached)

    lookup = await fetch()
    if not lookup.cacheable:
        return lookup
    if lookup.found:
        await cache.set(key, lookup.value, ttl)
    else:
        await cache.set_negative(key, ttl)
    return lookup
