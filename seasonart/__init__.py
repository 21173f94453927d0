"""
SeasonArt - Selection des visuels de saison depuis fanart.tv.

Ce package resout les images candidates (posters, bannieres, vignettes,
fonds) d'une saison de serie TV a partir du document fanart.tv de la serie,
puis les classe par resolution, langue et popularite.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (document fanart, candidats, ports)
- services/ : Couche application (filtrage, classement, orchestration)
- adapters/ : Couche infrastructure (CLI, client fanart.tv, cache disque)
"""

__version__ = "0.1.0"
