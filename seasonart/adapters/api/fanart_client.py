"""
Client fanart.tv API v3 pour les visuels de series TV.

Recupere le document JSON complet d'une serie (posters, bannieres,
vignettes et fonds, toutes saisons confondues) a partir de son ID TVDB.
Le document est retourne en texte brut pour etre stocke tel quel.

Reference API: https://fanarttv.docs.apiary.io/
"""

from typing import Optional

import httpx
from loguru import logger

from seasonart.adapters.api.retry import request_with_retry


class FanartClient:
    """
    Client HTTP pour l'endpoint /tv/{tvdb_id} de fanart.tv.

    La cle projet (api_key) est obligatoire, la cle personnelle
    (client_key) est optionnelle et donne acces aux images plus recentes.

    Example:
        client = FanartClient(api_key="your-api-key")
        payload = await client.get_series_json("81189")
        await client.close()
    """

    BASE_URL = "https://webservice.fanart.tv/v3"

    def __init__(
        self,
        api_key: Optional[str],
        client_key: Optional[str] = None,
        base_url: str = BASE_URL,
        timeout: float = 30.0,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client fanart.tv.

        Args:
            api_key: Cle API projet fanart.tv
            client_key: Cle API personnelle (optionnelle)
            base_url: URL de base de l'API v3
            timeout: Timeout global des requetes en secondes
            max_attempts: Tentatives maximum sur 429
        """
        self._api_key = api_key
        self._client_key = client_key
        self._base_url = base_url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
            )
        return self._client

    def _get_params(self) -> dict[str, str]:
        """Parametres d'authentification passes en query string."""
        if not self._api_key:
            raise RuntimeError("fanart.tv API key not configured.")
        params = {"api_key": self._api_key}
        if self._client_key:
            params["client_key"] = self._client_key
        return params

    async def get_series_json(self, tvdb_id: str) -> Optional[str]:
        """
        Telecharge le document fanart.tv d'une serie.

        Args:
            tvdb_id: ID TVDB de la serie

        Returns:
            Texte JSON du document, ou None si la serie est inconnue (404)

        Raises:
            RateLimitError: Si 429 apres epuisement des tentatives
            httpx.HTTPError: Pour les autres erreurs HTTP ou de transport
        """
        client = await self._get_client()
        try:
            response = await request_with_retry(
                client,
                "GET",
                f"/tv/{tvdb_id}",
                max_attempts=self._max_attempts,
                params=self._get_params(),
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                logger.debug(f"fanart.tv: aucune fiche pour la serie {tvdb_id}")
                return None
            raise

        logger.debug(f"fanart.tv: document telecharge pour la serie {tvdb_id}")
        return response.text

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
