"""
Entites du domaine.

- SeriesMetadataDocument : Document fanart.tv d'une serie (lecture seule)
- RawImageEntry : Ligne d'image brute du document
"""

from seasonart.core.entities.series_document import (
    RawImageEntry,
    SeriesMetadataDocument,
)

__all__ = [
    "RawImageEntry",
    "SeriesMetadataDocument",
]
