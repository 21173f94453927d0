"""
Utilitaires et constantes pour SeasonArt.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from seasonart.utils.constants import (
    CATEGORY_LAYOUT,
    PROVIDER_NAME,
    PROVIDER_ORDER,
    SUPPORTED_IMAGE_TYPES,
)

__all__ = [
    "CATEGORY_LAYOUT",
    "PROVIDER_NAME",
    "PROVIDER_ORDER",
    "SUPPORTED_IMAGE_TYPES",
]
