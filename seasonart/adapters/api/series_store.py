"""
Magasin des documents fanart.tv adosse au cache disque.

Implemente ISeriesMetadataStore : un document est retelecharge s'il est
absent ou plus vieux que la duree de fraicheur (2 jours par defaut).
Un 404 de fanart.tv n'efface pas une copie deja stockee.
"""

import asyncio
import json
import sqlite3
import time
import weakref
from typing import Callable, Optional

from loguru import logger

from seasonart.adapters.api.cache import APICache
from seasonart.adapters.api.fanart_client import FanartClient
from seasonart.core.entities.series_document import SeriesMetadataDocument
from seasonart.core.exceptions import StoreError
from seasonart.core.ports.metadata_store import FetchStatus, ISeriesMetadataStore


class CachedSeriesMetadataStore(ISeriesMetadataStore):
    """
    Magasin de documents series : fanart.tv + diskcache.

    Les appels concurrents a ensure_cached pour une meme serie
    partagent un seul telechargement.

    Example:
        store = CachedSeriesMetadataStore(client=client, cache=cache)
        if (await store.ensure_cached("81189")).is_available:
            document = await store.read_cached("81189")
    """

    DEFAULT_TTL_DAYS = 2

    def __init__(
        self,
        client: FanartClient,
        cache: APICache,
        ttl_days: int = DEFAULT_TTL_DAYS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._client = client
        self._cache = cache
        self._ttl_seconds = ttl_days * 24 * 60 * 60
        self._clock = clock
        # Un verrou ne vit que le temps des appels qui le partagent
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    @staticmethod
    def cache_key(series_id: str) -> str:
        """Cle du document d'une serie dans le cache."""
        return f"fanart:tv:{series_id}"

    def _lock_for(self, series_id: str) -> asyncio.Lock:
        lock = self._locks.get(series_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[series_id] = lock
        return lock

    def _is_fresh(self, fetched_at: Optional[float]) -> bool:
        if fetched_at is None:
            return False
        return self._clock() - fetched_at <= self._ttl_seconds

    async def ensure_cached(
        self, series_id: str, force: bool = False
    ) -> FetchStatus:
        """
        Telecharge le document si absent, perime ou si force=True.

        Raises:
            StoreError: Si le cache disque est inaccessible
            RateLimitError: Si fanart.tv limite apres epuisement des tentatives
            httpx.HTTPError: Pour les autres erreurs HTTP ou de transport
        """
        key = self.cache_key(series_id)
        async with self._lock_for(series_id):
            if not force:
                try:
                    _, fetched_at = await self._cache.get_document(key)
                except (OSError, sqlite3.Error) as e:
                    raise StoreError(series_id, f"cache read failed: {e}") from e
                if self._is_fresh(fetched_at):
                    logger.debug(f"Cache hit pour la serie {series_id}")
                    return FetchStatus.CACHED

            logger.debug(f"Cache miss pour la serie {series_id}, telechargement")
            payload = await self._client.get_series_json(series_id)
            if payload is None:
                return FetchStatus.NOT_FOUND

            try:
                await self._cache.set_document(key, payload, fetched_at=self._clock())
            except (OSError, sqlite3.Error) as e:
                raise StoreError(series_id, f"cache write failed: {e}") from e
            return FetchStatus.FETCHED

    async def read_cached(self, series_id: str) -> Optional[SeriesMetadataDocument]:
        """Relit et decode le document local, None si absent ou illisible."""
        key = self.cache_key(series_id)
        try:
            payload, _ = await self._cache.get_document(key)
        except (OSError, sqlite3.Error) as e:
            logger.warning(f"Cache illisible pour la serie {series_id}: {e}")
            return None

        if payload is None:
            return None

        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            logger.warning(f"Document invalide pour la serie {series_id}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Document inattendu pour la serie {series_id}")
            return None

        return SeriesMetadataDocument.from_json(data)
