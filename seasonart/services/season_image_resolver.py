"""
Resolution et classement des visuels d'une saison.

Ce module fournit les fonctions pures qui transforment un document fanart.tv
en liste ordonnee d'images candidates pour une saison :

1. Filtrage : chaque categorie (poster, banniere, vignette, fond) est
   parcourue et seules les entrees dont le numero de saison correspond
   sont conservees.
2. Classement (tri stable, decroissant sur chaque critere) :
   - Largeur : les visuels haute resolution d'abord
   - Palier de langue (0, 2 ou 3) : langue demandee, puis anglais
     en secours, les images sans texte selon la langue demandee
   - Likes de la communaute
   - Nombre de votes (toujours absent chez fanart.tv)

Aucune E/S : le document est deja en memoire.
"""

from typing import Iterable, Optional

from seasonart.core.entities.series_document import (
    RawImageEntry,
    SeriesMetadataDocument,
)
from seasonart.core.value_objects.artwork import (
    ImageCandidate,
    ImageType,
    RatingType,
)
from seasonart.utils.constants import CATEGORY_LAYOUT, PROVIDER_NAME
from seasonart.utils.helpers import parse_invariant_int, upgrade_to_https


# ====================
# Paliers de langue
# ====================

TIER_PREFERRED = 3
TIER_FALLBACK = 2
TIER_OTHER = 0

ENGLISH = "en"


# ====================
# Filtrage
# ====================


def entry_matches_season(entry: RawImageEntry, season_index: int) -> bool:
    """
    Vrai si l'entree a une URL et appartient a la saison demandee.

    Les saisons non numeriques ("all", "1,0", vide) ne correspondent jamais.
    """
    if not entry.url or not entry.season:
        return False
    return parse_invariant_int(entry.season) == season_index


def to_candidate(
    entry: RawImageEntry,
    image_type: ImageType,
    width: int,
    height: int,
) -> ImageCandidate:
    """Convertit une entree brute en candidat aux dimensions de sa categorie."""
    return ImageCandidate(
        image_type=image_type,
        width=width,
        height=height,
        provider_name=PROVIDER_NAME,
        url=upgrade_to_https(entry.url),
        language=entry.lang,
        community_rating=parse_invariant_int(entry.likes),
        vote_count=None,
        rating_type=RatingType.LIKES,
    )


def collect_season_candidates(
    document: Optional[SeriesMetadataDocument],
    season_index: int,
) -> list[ImageCandidate]:
    """
    Extrait les candidats d'une saison, non classes.

    Les categories sont parcourues dans l'ordre poster, banniere,
    vignette, fond ; l'ordre du document est conserve dans chacune.

    Args:
        document: Document fanart.tv de la serie (None si indisponible)
        season_index: Numero de saison recherche

    Returns:
        Liste de candidats, vide si le document est absent
    """
    if document is None:
        return []

    candidates: list[ImageCandidate] = []
    for category, (image_type, width, height) in CATEGORY_LAYOUT.items():
        for entry in document.entries(category):
            if entry_matches_season(entry, season_index):
                candidates.append(to_candidate(entry, image_type, width, height))
    return candidates


# ====================
# Classement
# ====================


def language_tier(language: Optional[str], preferred_language: Optional[str]) -> int:
    """
    Calcule le palier de langue d'un candidat.

    - 3 : langue identique a la langue demandee (casse ignoree)
    - 2 : demande non anglaise et image en anglais
    - image sans langue : 3 si la demande est en anglais, sinon 2
    - 0 : toute autre langue

    Une image sans langue vaut autant qu'une image anglaise quand
    la demande est en anglais. Sans langue demandee, aucune image
    n'obtient le palier 3.
    """
    language = (language or "").lower()
    preferred = preferred_language.lower() if preferred_language is not None else None
    is_preferred_english = preferred == ENGLISH

    if language == preferred:
        return TIER_PREFERRED

    if not is_preferred_english and language == ENGLISH:
        return TIER_FALLBACK

    if not language:
        return TIER_PREFERRED if is_preferred_english else TIER_FALLBACK

    return TIER_OTHER


def ranking_key(
    candidate: ImageCandidate, preferred_language: Optional[str]
) -> tuple[int, int, int, int]:
    """Cle de classement (largeur, palier, likes, votes), les absents valent 0."""
    return (
        candidate.width or 0,
        language_tier(candidate.language, preferred_language),
        candidate.community_rating or 0,
        candidate.vote_count or 0,
    )


def rank_candidates(
    candidates: Iterable[ImageCandidate],
    preferred_language: Optional[str],
) -> list[ImageCandidate]:
    """
    Trie les candidats du meilleur au moins bon.

    Tri stable : a cle egale, l'ordre d'entree est conserve.
    """
    return sorted(
        candidates,
        key=lambda c: tuple(-part for part in ranking_key(c, preferred_language)),
    )


class SeasonImageResolver:
    """
    Resolveur des visuels d'une saison.

    Sans etat : peut etre partage entre requetes concurrentes.

    Example:
        resolver = SeasonImageResolver()
        images = resolver.resolve(document, season_index=2, preferred_language="fr")
    """

    def resolve(
        self,
        document: Optional[SeriesMetadataDocument],
        season_index: int,
        preferred_language: Optional[str],
    ) -> list[ImageCandidate]:
        """
        Filtre puis classe les visuels d'une saison.

        Args:
            document: Document fanart.tv (None si la serie est inconnue)
            season_index: Numero de saison
            preferred_language: Code langue prefere

        Returns:
            Candidats classes, liste vide si aucun visuel
        """
        candidates = collect_season_candidates(document, season_index)
        return rank_candidates(candidates, preferred_language)
