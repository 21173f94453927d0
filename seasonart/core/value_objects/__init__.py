"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ArtworkCategory : Listes d'images du document fanart.tv
- ImageType : Type de visuel (Primary, Banner, Thumb, Backdrop)
- RatingType : Nature du signal communautaire (likes)
- ImageCandidate : Image candidate classee pour une saison
- SeasonIdentity : Serie + saison + langue preferee
"""

from seasonart.core.value_objects.artwork import (
    ArtworkCategory,
    ImageCandidate,
    ImageType,
    RatingType,
    SeasonIdentity,
)

__all__ = [
    "ArtworkCategory",
    "ImageCandidate",
    "ImageType",
    "RatingType",
    "SeasonIdentity",
]
