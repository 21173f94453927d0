"""
Constantes globales pour SeasonArt.

Ce module contient les constantes utilisees dans l'application:
- Bornes des entiers 32 bits (numeros de saison, likes)
- Identite du fournisseur fanart.tv
- Dimensions fixes des visuels par categorie
"""

from seasonart.core.value_objects.artwork import ArtworkCategory, ImageType

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Fournisseur
PROVIDER_NAME = "Fanart"
PROVIDER_ORDER = 1

SUPPORTED_IMAGE_TYPES = (
    ImageType.BACKDROP,
    ImageType.THUMB,
    ImageType.BANNER,
    ImageType.PRIMARY,
)

# Categorie fanart.tv -> (type, largeur, hauteur), dans l'ordre de parcours
CATEGORY_LAYOUT: dict[ArtworkCategory, tuple[ImageType, int, int]] = {
    ArtworkCategory.SEASON_POSTER: (ImageType.PRIMARY, 1000, 1426),
    ArtworkCategory.SEASON_BANNER: (ImageType.BANNER, 1000, 185),
    ArtworkCategory.SEASON_THUMB: (ImageType.THUMB, 500, 281),
    ArtworkCategory.SHOW_BACKGROUND: (ImageType.BACKDROP, 1920, 1080),
}
