"""
Exceptions du domaine SeasonArt.

Les cas "pas de visuel disponible" (serie inconnue, cache absent, champ
malforme) ne sont jamais des erreurs : ils produisent une liste vide.
Seules les pannes d'infrastructure remontent sous forme d'exception.
"""


class StoreError(Exception):
    """
    Echec du magasin local de documents series.

    Levee quand le cache disque ne peut pas etre ecrit ou interroge
    pendant la phase de rafraichissement. Propagee a l'appelant.

    Attributes:
        series_id: ID TVDB de la serie concernee
    """

    def __init__(self, series_id: str, message: str) -> None:
        self.series_id = series_id
        super().__init__(f"Series {series_id}: {message}")
