"""
Interface port pour le magasin de documents series.

Le magasin garantit qu'une copie locale du document fanart.tv d'une serie
existe (telechargement ou rafraichissement si absente ou perimee) et permet
de la relire. Le domaine ne connait ni le transport HTTP ni le stockage.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from seasonart.core.entities.series_document import SeriesMetadataDocument


class FetchStatus(str, Enum):
    """Resultat de ensure_cached."""

    FETCHED = "fetched"
    CACHED = "cached"
    NOT_FOUND = "not_found"

    @property
    def is_available(self) -> bool:
        """Vrai si un document a ete telecharge ou etait deja frais."""
        return self is not FetchStatus.NOT_FOUND


class ISeriesMetadataStore(ABC):
    """
    Interface du magasin de documents series.

    Les erreurs de transport ou de stockage autres que "introuvable"
    sont levees telles quelles par ensure_cached.
    """

    @abstractmethod
    async def ensure_cached(
        self, series_id: str, force: bool = False
    ) -> FetchStatus:
        """
        S'assure que le document de la serie est present et frais localement.

        Args :
            series_id : ID TVDB de la serie
            force : Ignore la fraicheur et retelecharge le document

        Retourne :
            FETCHED, CACHED, ou NOT_FOUND si la serie est inconnue du fournisseur
        """
        ...

    @abstractmethod
    async def read_cached(self, series_id: str) -> Optional[SeriesMetadataDocument]:
        """
        Relit le document local d'une serie.

        Args :
            series_id : ID TVDB de la serie

        Retourne :
            Le document, ou None si la copie locale est absente ou illisible
        """
        ...
