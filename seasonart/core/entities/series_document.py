"""
Document de metadonnees fanart.tv d'une serie.

Represente le JSON renvoye par fanart.tv (endpoint v3 /tv/{tvdb_id}) tel
qu'il est stocke dans le cache local. Les champs numeriques restent du texte :
la conversion est faite au moment du filtrage, entree par entree, pour qu'une
valeur malformee n'invalide jamais le document entier.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from seasonart.core.value_objects.artwork import ArtworkCategory


def _as_text(value: Any) -> str:
    """Convertit une valeur JSON en texte, None devient une chaine vide."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class RawImageEntry:
    """
    Ligne d'image brute du document fanart.tv.

    Attributs :
        url : URL de l'image
        season : Numero de saison en texte ("1", "0", "all", ou vide)
        lang : Code langue ("" si absent)
        likes : Nombre de likes en texte
        id : Identifiant fanart.tv de l'image
    """

    url: str = ""
    season: str = ""
    lang: str = ""
    likes: str = ""
    id: str = ""

    @classmethod
    def from_json(cls, data: Any) -> Optional["RawImageEntry"]:
        """Construit une entree depuis un element JSON, None si ce n'est pas un objet."""
        if not isinstance(data, dict):
            return None
        return cls(
            url=_as_text(data.get("url")),
            season=_as_text(data.get("season")),
            lang=_as_text(data.get("lang")),
            likes=_as_text(data.get("likes")),
            id=_as_text(data.get("id")),
        )


@dataclass(frozen=True)
class SeriesMetadataDocument:
    """
    Document fanart.tv d'une serie, en lecture seule.

    Les quatre listes d'images utiles aux saisons sont regroupees dans
    un mapping categorie -> entrees, dans l'ordre du document.

    Attributs :
        images : Entrees par categorie
        name : Nom de la serie cote fanart.tv
        tvdb_id : ID TVDB repete dans le document
    """

    images: Mapping[ArtworkCategory, tuple[RawImageEntry, ...]] = field(
        default_factory=dict
    )
    name: str = ""
    tvdb_id: str = ""

    def entries(self, category: ArtworkCategory) -> tuple[RawImageEntry, ...]:
        """Retourne les entrees d'une categorie (tuple vide si absente)."""
        return self.images.get(category, ())

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SeriesMetadataDocument":
        """
        Construit le document depuis le JSON fanart.tv deja decode.

        Tolerant : une categorie absente ou qui n'est pas une liste est vide,
        les elements qui ne sont pas des objets sont ignores.
        """
        images: dict[ArtworkCategory, tuple[RawImageEntry, ...]] = {}
        for category in ArtworkCategory:
            raw_list = data.get(category.value)
            if not isinstance(raw_list, list):
                images[category] = ()
                continue
            entries = (RawImageEntry.from_json(item) for item in raw_list)
            images[category] = tuple(e for e in entries if e is not None)

        return cls(
            images=images,
            name=_as_text(data.get("name")),
            tvdb_id=_as_text(data.get("thetvdb_id")),
        )
