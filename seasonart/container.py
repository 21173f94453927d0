"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI :
configuration, cache disque, client fanart.tv, magasin de documents
series et service de visuels de saison.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import APICache
from .adapters.api.fanart_client import FanartClient
from .adapters.api.series_store import CachedSeriesMetadataStore
from .config import Settings
from .services.season_image_resolver import SeasonImageResolver
from .services.season_images import SeasonImageService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.season_image_service()
        images = await service.get_images(identity)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache disque - Singleton partage par le magasin
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
    )

    # Client fanart.tv - Singleton pour le connection pooling
    fanart_client = providers.Singleton(
        FanartClient,
        api_key=config.provided.fanart_api_key,
        client_key=config.provided.fanart_client_key,
        base_url=config.provided.fanart_base_url,
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.max_retry_attempts,
    )

    # Magasin de documents - Singleton (verrous par serie partages)
    metadata_store = providers.Singleton(
        CachedSeriesMetadataStore,
        client=fanart_client,
        cache=api_cache,
        ttl_days=config.provided.cache_ttl_days,
    )

    # Resolveur sans etat - Singleton
    season_image_resolver = providers.Singleton(SeasonImageResolver)

    season_image_service = providers.Factory(
        SeasonImageService,
        metadata_store=metadata_store,
        resolver=season_image_resolver,
    )
