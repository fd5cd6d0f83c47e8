"""
Execution des requetes HTTP vers les sources externes sans retry.

Chaque appel est execute une seule fois et son issue est convertie en Lookup :
- erreur de transport ou timeout -> UNAVAILABLE
- 404 -> NOT_FOUND (seule absence mise en cache par les clients)
- autre statut non-2xx (dont 429, Retry-After journalise) -> UNAVAILABLE
- corps JSON invalide ou non conforme au modele attendu -> UNAVAILABLE

Les exceptions ne remontent jamais aux appelants, a l'exception de
asyncio.CancelledError (annulation de la tache par l'appelant).

Usage:
    lookup = await fetch_json(client, "GET", "/search/movie", params={"query": "Matrix"})
    if lookup.found:
        response = parse_model(TmdbSearchResponse, lookup)
"""

from typing import Any, Optional, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from dynamic_library.core.value_objects.lookup import Lookup

M = TypeVar("M", bound=BaseModel)


def _describe(method: str, url: str) -> str:
    return f"{method.upper()} {url}"


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs: Any,
) -> Lookup[httpx.Response]:
    """
    Execute une requete et qualifie son issue sans lire le corps.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL (relative a base_url du client ou absolue)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        Lookup contenant la reponse 2xx, ou l'absence qualifiee
    """
    target = _describe(method, url)
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.TimeoutException as e:
        logger.warning(f"Timeout sur {target}: {e!r}")
        return Lookup.unavailable(f"timeout: {target}")
    except httpx.HTTPError as e:
        logger.warning(f"Erreur de transport sur {target}: {e!r}")
        return Lookup.unavailable(f"transport: {target}")

    return qualify_response(response, target)


def qualify_response(response: httpx.Response, target: str) -> Lookup[httpx.Response]:
    """Convertit le statut HTTP d'une reponse recue en Lookup."""
    if response.status_code == 404:
        logger.debug(f"{target} -> 404")
        return Lookup.not_found(f"404: {target}")

    if response.status_code == 429:
        retry_after = response.headers.get("Retry-After")
        logger.warning(f"Rate limit atteint sur {target} (Retry-After: {retry_after})")
        return Lookup.unavailable(f"429: {target}")

    if not response.is_success:
        logger.warning(f"{target} -> HTTP {response.status_code}: {response.text[:200]}")
        return Lookup.unavailable(f"{response.status_code}: {target}")

    return Lookup.ok(response)


async def fetch_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs: Any,
) -> Lookup[Any]:
    """
    Execute une requete et decode le corps JSON.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL (relative a base_url du client ou absolue)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        Lookup contenant le JSON decode, ou l'absence qualifiee

    Example:
        async with httpx.AsyncClient(base_url="https://api.example") as client:
            lookup = await fetch_json(client, "GET", "/items/1")
    """
    return decode_json(await send(client, method, url, **kwargs), _describe(method, url))


def decode_json(lookup: Lookup[httpx.Response], target: str) -> Lookup[Any]:
    """Decode le corps JSON d'une reponse qualifiee (JSON invalide -> UNAVAILABLE)."""
    if not lookup.found:
        return lookup

    try:
        return Lookup.ok(lookup.value.json())
    except ValueError:
        logger.warning(f"Reponse JSON invalide pour {target}")
        return Lookup.unavailable(f"invalid json: {target}")


def parse_model(model: type[M], lookup: Lookup[Any]) -> Lookup[M]:
    """
    Valide un JSON decode contre un modele pydantic.

    Une reponse non conforme est traitee comme une source indisponible.

    Args:
        model: Classe pydantic attendue
        lookup: Resultat de fetch_json()

    Returns:
        Lookup contenant l'instance du modele, ou l'absence qualifiee
    """
    if not lookup.found:
        return lookup
    try:
        return Lookup.ok(model.model_validate(lookup.value))
    except ValidationError as e:
        logger.warning(f"Reponse non conforme a {model.__name__}: {e.error_count()} erreur(s)")
        return Lookup.unavailable(f"malformed: {model.__name__}")


def build_timeout(seconds: float, connect: Optional[float] = 10.0) -> httpx.Timeout:
    """Retourne le timeout borne applique a chaque appel d'une source."""
    return httpx.Timeout(seconds, connect=min(connect, seconds) if connect else None)
