"""
Objets valeur pour les visuels de saison.

Objets valeur immutables représentant une demande de visuels pour une saison
et les images candidates produites par le resolveur.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilité.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ImageType(str, Enum):
    """Type de visuel tel qu'expose aux consommateurs."""

    PRIMARY = "Primary"
    BANNER = "Banner"
    THUMB = "Thumb"
    BACKDROP = "Backdrop"


class RatingType(str, Enum):
    """Nature du signal communautaire porte par community_rating."""

    LIKES = "Likes"


class ArtworkCategory(str, Enum):
    """
    Listes d'images du document fanart.tv exploitees pour une saison.

    La valeur est le nom du champ JSON cote fanart.tv.
    """

    SEASON_POSTER = "seasonposter"
    SEASON_BANNER = "seasonbanner"
    SEASON_THUMB = "seasonthumb"
    SHOW_BACKGROUND = "showbackground"


@dataclass(frozen=True)
class SeasonIdentity:
    """
    Identite d'une saison pour laquelle on cherche des visuels.

    Attributs :
        series_id : ID TVDB de la serie (None si la serie n'est pas identifiee)
        season_index : Numero de saison (0 pour les specials, None si inconnu)
        preferred_language : Code langue ISO 639-1 prefere (ex: "fr", "en")
    """

    series_id: Optional[str]
    season_index: Optional[int]
    preferred_language: str = "en"

    @property
    def is_resolvable(self) -> bool:
        """Vrai si l'ID serie et le numero de saison sont connus."""
        return bool(self.series_id) and self.season_index is not None


@dataclass(frozen=True)
class ImageCandidate:
    """
    Image candidate pour une saison.

    Les dimensions sont fixees par type de visuel (fanart.tv impose des
    formats), elles ne sont pas lues depuis les donnees source.

    Attributs :
        image_type : Type de visuel (PRIMARY, BANNER, THUMB, BACKDROP)
        width : Largeur en pixels
        height : Hauteur en pixels
        provider_name : Nom du fournisseur ("Fanart")
        url : URL de l'image, toujours en https si la source etait en http
        language : Code langue de l'image ("" si l'image n'a pas de texte)
        community_rating : Nombre de likes, None si absent ou illisible
        vote_count : Nombre de votes, toujours None pour fanart.tv
        rating_type : Nature de community_rating
    """

    image_type: ImageType
    width: Optional[int]
    height: Optional[int]
    provider_name: str
    url: str
    language: str = ""
    community_rating: Optional[int] = None
    vote_count: Optional[int] = None
    rating_type: RatingType = RatingType.LIKES

    def to_dict(self) -> dict[str, Any]:
        """
        Serialise le candidat pour une sortie JSON.

        Les champs optionnels a None sont omis.
        """
        data: dict[str, Any] = {
            "type": self.image_type.value,
            "width": self.width,
            "height": self.height,
            "providerName": self.provider_name,
            "url": self.url,
            "language": self.language,
        }
        if self.community_rating is not None:
            data["communityRating"] = self.community_rating
        if self.vote_count is not None:
            data["voteCount"] = self.vote_count
        data["ratingType"] = self.rating_type.value
        return data
