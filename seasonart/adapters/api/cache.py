"""
Cache disque des documents fanart.tv.

Le cache utilise diskcache pour la persistence sur disque, ce qui permet
de conserver les documents entre les redemarrages de l'application.

Chaque document est stocke sans expiration, en texte JSON brut, avec
l'horodatage du telechargement en tag diskcache. La fraicheur est decidee
par le magasin : une copie perimee reste lisible si le rafraichissement
echoue.
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any, Optional, Union

from diskcache import Cache


class APICache:
    """
    Cache asynchrone des reponses fanart.tv.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes.

    Example:
        cache = APICache(cache_dir=".cache/fanart")
        await cache.set_document("fanart:tv:81189", payload, fetched_at=time.time())
        payload, fetched_at = await cache.get_document("fanart:tv:81189")
    """

    def __init__(self, cache_dir: Union[str, Path] = ".cache/fanart") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    async def get_document(self, key: str) -> tuple[Optional[Any], Optional[float]]:
        """
        Recupere un document et l'horodatage de son telechargement.

        Returns:
            (valeur, horodatage epoch) ou (None, None) si absent
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self._cache.get, key, tag=True)
        )

    async def set_document(self, key: str, value: Any, fetched_at: float) -> None:
        """
        Stocke un document sans expiration, horodate.

        Args:
            key: Cle unique (ex: "fanart:tv:81189")
            value: Texte JSON du document
            fetched_at: Horodatage epoch du telechargement
        """
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, tag=fetched_at)
        )

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
