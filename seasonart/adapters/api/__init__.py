"""
Client API fanart.tv et cache des documents series.

Ce module fournit les adaptateurs pour communiquer avec fanart.tv:
- FanartClient: telechargement du document JSON d'une serie
- CachedSeriesMetadataStore: implementation de ISeriesMetadataStore

Infrastructure partagee:
- APICache: Cache disque persistant (diskcache) des documents horodates
- RateLimitError: Exception pour les erreurs 429
- with_retry / request_with_retry: Backoff exponentiel sur rate limiting
"""

from seasonart.adapters.api.cache import APICache
from seasonart.adapters.api.fanart_client import FanartClient
from seasonart.adapters.api.retry import (
    RateLimitError,
    request_with_retry,
    with_retry,
)
from seasonart.adapters.api.series_store import CachedSeriesMetadataStore

__all__ = [
    "APICache",
    "CachedSeriesMetadataStore",
    "FanartClient",
    "RateLimitError",
    "request_with_retry",
    "with_retry",
]
