"""
Couche domaine (core).

Contient le document fanart.tv, les objets valeur des visuels et les ports.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (HTTP, cache disque).

Sous-packages :
- entities/ : Document de métadonnées d'une série et ses entrées brutes
- ports/ : Interfaces abstraites (magasin de documents séries)
- value_objects/ : Objets valeur immutables (ImageCandidate, SeasonIdentity)
"""
