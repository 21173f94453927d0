"""
Service de recuperation des visuels d'une saison.

Orchestre le magasin de documents series et le resolveur :
- court-circuite si la serie ou la saison n'est pas identifiee
- demande au magasin de garantir un document local frais
- traite "serie introuvable" et "cache illisible" comme une absence de visuels
- laisse remonter les autres erreurs (transport, stockage), sans retry
"""

from typing import Optional

from loguru import logger

from seasonart.core.entities.series_document import SeriesMetadataDocument
from seasonart.core.ports.metadata_store import FetchStatus, ISeriesMetadataStore
from seasonart.core.value_objects.artwork import ImageCandidate, SeasonIdentity
from seasonart.services.season_image_resolver import SeasonImageResolver


class SeasonImageService:
    """
    Service pour obtenir les visuels classes d'une saison.

    Example:
        service = SeasonImageService(metadata_store=store)
        images = await service.get_images(
            SeasonIdentity(series_id="81189", season_index=2, preferred_language="fr")
        )
    """

    def __init__(
        self,
        metadata_store: ISeriesMetadataStore,
        resolver: Optional[SeasonImageResolver] = None,
    ) -> None:
        self._metadata_store = metadata_store
        self._resolver = resolver or SeasonImageResolver()

    async def get_images(self, identity: SeasonIdentity) -> list[ImageCandidate]:
        """
        Retourne les visuels classes d'une saison.

        Args:
            identity: Serie, saison et langue preferee

        Returns:
            Candidats classes, liste vide si aucun visuel disponible

        Raises:
            httpx.HTTPError: Echec de transport autre qu'un 404
            StoreError: Echec d'ecriture du cache local
        """
        if not identity.is_resolvable:
            logger.debug(
                f"Saison non identifiee (serie={identity.series_id}, "
                f"saison={identity.season_index}), aucun visuel"
            )
            return []

        document = await self.load_document(identity.series_id)
        images = self._resolver.resolve(
            document, identity.season_index, identity.preferred_language
        )
        logger.debug(
            f"{len(images)} visuel(s) pour la serie {identity.series_id} "
            f"saison {identity.season_index}"
        )
        return images

    async def load_document(
        self, series_id: str, force: bool = False
    ) -> Optional[SeriesMetadataDocument]:
        """
        Garantit puis relit le document d'une serie.

        Args:
            series_id: ID TVDB de la serie
            force: Retelecharge le document meme s'il est frais

        Returns:
            Le document, ou None si la serie est inconnue ou le cache illisible
        """
        status = await self._metadata_store.ensure_cached(series_id, force=force)
        if status is FetchStatus.NOT_FOUND:
            logger.debug(f"Serie {series_id} introuvable chez fanart.tv")
            return None

        document = await self._metadata_store.read_cached(series_id)
        if document is None:
            logger.debug(f"Pas de document local pour la serie {series_id}")
        return document
