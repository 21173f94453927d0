"""
Fonctions utilitaires partagees dans le projet SeasonArt.

Ce module centralise les fonctions reutilisees a travers le codebase :
- parse_invariant_int : conversion texte -> entier independante de la locale
- upgrade_to_https : passage d'une URL http en https
"""

import re
from typing import Optional

from seasonart.utils.constants import INT32_MAX, INT32_MIN

# Signe optionnel, chiffres ASCII uniquement, blancs autorises autour.
# Pas de separateur de milliers, pas de "_" (contrairement a int()).
_INVARIANT_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")

_HTTP_SCHEME_PATTERN = re.compile(r"^http://", re.IGNORECASE)


def parse_invariant_int(text: Optional[str]) -> Optional[int]:
    """
    Convertit un texte en entier 32 bits signe, en base 10.

    Retourne None plutot que de lever une exception si le texte est vide,
    contient des separateurs ("1,000", "1.000", "1 000"), des chiffres
    non ASCII, ou sort de l'intervalle 32 bits.

    Example:
        parse_invariant_int(" 12 ")  # 12
        parse_invariant_int("1,000")  # None
    """
    if not text:
        return None
    match = _INVARIANT_INT_PATTERN.fullmatch(text)
    if match is None:
        return None
    value = int(match.group(1))
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def upgrade_to_https(url: str) -> str:
    """Remplace le schema http:// (toute casse) par https://, sans toucher aux autres."""
    return _HTTP_SCHEME_PATTERN.sub("https://", url, count=1)
