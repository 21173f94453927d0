"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- api/ : Client fanart.tv, cache disque et magasin de documents séries
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""
