"""
Gestion des tokens d'authentification et des valeurs initialisees une seule fois.

TokenManager : machine a etats NO_TOKEN -> VALID -> EXPIRED -> VALID ...
- chemin rapide sans verrou tant que le token est valide
- chemin lent sous asyncio.Lock (un verrou par client), avec re-verification
  apres acquisition : N appelants concurrents declenchent un seul login
- un echec de login laisse le token precedent intact et le retourne
  (un echec transitoire n'invalide pas une session encore acceptee)

GuardedValue : meme discipline pour une valeur resolue une seule fois par
processus (ex: URL de base des images TMDB). Un echec n'est pas memorise.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from loguru import logger

T = TypeVar("T")

LoginCallable = Callable[[], Awaitable[Optional[str]]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenState(Enum):
    """Etat du token d'un client."""

    NO_TOKEN = "no_token"
    VALID = "valid"
    EXPIRED = "expired"


class TokenManager:
    """
    Token bearer et son expiration, rafraichis sous exclusion mutuelle.

    L'expiration stockee est volontairement plus courte que la validite
    annoncee par l'emetteur (ex: 25 jours pour un token de 30 jours).

    Attributes:
        name: Nom de la source (pour les logs)

    Example:
        async def login() -> Optional[str]:
            ...  # POST /login, retourne le token ou None
        tokens = TokenManager(login, validity=timedelta(days=25), name="tvdb")
        token = await tokens.get_token()
    """

    def __init__(
        self,
        login: LoginCallable,
        validity: timedelta,
        name: str = "api",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialise le gestionnaire sans token.

        Args:
            login: Coroutine realisant le login, retourne le token ou None
                   (identifiants absents ou echec)
            validity: Duree de validite appliquee a chaque nouveau token
            name: Nom de la source (pour les logs)
            clock: Horloge UTC (injectable pour les tests)
        """
        self._login = login
        self._validity = validity
        self._clock = clock
        self.name = name
        self._token: Optional[str] = None
        self._expiry: Optional[datetime] = None
        self._lock = asyncio.Lock()

    @property
    def state(self) -> TokenState:
        """Etat courant du token."""
        if self._token is None:
            return TokenState.NO_TOKEN
        if self._expiry is not None and self._clock() < self._expiry:
            return TokenState.VALID
        return TokenState.EXPIRED

    @property
    def expiry(self) -> Optional[datetime]:
        """Date d'expiration du token courant."""
        return self._expiry

    def _valid_token(self) -> Optional[str]:
        if self.state is TokenState.VALID:
            return self._token
        return None

    async def get_token(self) -> Optional[str]:
        """
        Retourne un token valide, en se reconnectant si necessaire.

        Returns:
            Token valide, token precedent si le login echoue, ou None
            si aucun token n'a jamais ete obtenu
        """
        token = self._valid_token()
        if token is not None:
            return token

        async with self._lock:
            # Un autre appelant a pu rafraichir pendant l'attente du verrou
            token = self._valid_token()
            if token is not None:
                return token

            logger.debug(f"[{self.name}] Authentification (etat: {self.state.value})")
            new_token = await self._login()

            if not new_token:
                if self._token is not None:
                    logger.warning(f"[{self.name}] Echec du login, conservation du token precedent")
                    return self._token
                return None

            # Token et expiration remplaces ensemble, sous le verrou
            self._token, self._expiry = new_token, self._clock() + self._validity
            logger.debug(f"[{self.name}] Token obtenu, expiration {self._expiry.isoformat()}")
            return new_token

    def invalidate(self) -> None:
        """Force un login au prochain appel (le token reste disponible en secours)."""
        self._expiry = None


class GuardedValue(Generic[T]):
    """
    Valeur resolue une seule fois, protegee par un double controle.

    Example:
        base_url = GuardedValue(fetch_image_base_url)
        value = await base_url.get()  # None si la resolution echoue
    """

    def __init__(self, factory: Callable[[], Awaitable[Optional[T]]]) -> None:
        self._factory = factory
        self._value: Optional[T] = None
        self._lock = asyncio.Lock()

    @property
    def value(self) -> Optional[T]:
        """Valeur resolue, ou None si pas encore connue."""
        return self._value

    async def get(self) -> Optional[T]:
        """Retourne la valeur, en la resolvant sous verrou si inconnue."""
        if self._value is not None:
            return self._value

        async with self._lock:
            if self._value is not None:
                return self._value
            value = await self._factory()
            if value is not None:
                self._value = value
            return value
