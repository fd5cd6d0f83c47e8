"""
Resultat explicite d'une recherche aupres d'une source externe.

Un Lookup porte soit une valeur (OK), soit la raison de son absence :
- NOT_CONFIGURED : cle API ou URL manquante
- UNAVAILABLE : erreur de transport, timeout, statut non-2xx ou reponse invalide
- NOT_FOUND : reponse negative definitive (404), seule absence mise en cache
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LookupStatus(Enum):
    """Issue d'un appel a une source externe.

    Valeurs:
        OK: Valeur obtenue
        NOT_CONFIGURED: Source non configuree
        UNAVAILABLE: Source injoignable ou reponse inexploitable
        NOT_FOUND: La source repond que l'element n'existe pas
    """

    OK = "ok"
    NOT_CONFIGURED = "not_configured"
    UNAVAILABLE = "unavailable"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Lookup(Generic[T]):
    """
    Valeur ou absence qualifiee.

    Attributs:
        status: Issue de l'appel
        value: Valeur obtenue (None si status != OK)
        detail: Message court decrivant l'echec (pour les logs)
    """

    status: LookupStatus
    value: Optional[T] = None
    detail: Optional[str] = None

    @property
    def found(self) -> bool:
        """True si une valeur a ete obtenue."""
        return self.status is LookupStatus.OK

    @property
    def cacheable(self) -> bool:
        """True si le resultat peut etre mis en cache (succes ou 404)."""
        return self.status in (LookupStatus.OK, LookupStatus.NOT_FOUND)

    @classmethod
    def ok(cls, value: T) -> "Lookup[T]":
        return cls(LookupStatus.OK, value)

    @classmethod
    def not_configured(cls, detail: Optional[str] = None) -> "Lookup[T]":
        return cls(LookupStatus.NOT_CONFIGURED, detail=detail)

    @classmethod
    def unavailable(cls, detail: Optional[str] = None) -> "Lookup[T]":
        return cls(LookupStatus.UNAVAILABLE, detail=detail)

    @classmethod
    def not_found(cls, detail: Optional[str] = None) -> "Lookup[T]":
        return cls(LookupStatus.NOT_FOUND, detail=detail)

    def map(self, func) -> "Lookup":
        """Applique func a la valeur si presente, conserve le statut sinon."""
        if not self.found:
            return self
        return Lookup.ok(func(self.value))
