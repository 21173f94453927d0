"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports magasin : Contrats d'accès aux documents séries
- ISeriesMetadataStore : Cache local des documents fanart.tv
- FetchStatus : Résultat d'un ensure_cached
"""

from seasonart.core.ports.metadata_store import (
    FetchStatus,
    ISeriesMetadataStore,
)

__all__ = [
    "FetchStatus",
    "ISeriesMetadataStore",
]
