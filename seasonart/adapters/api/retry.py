"""
Mecanisme de retry avec backoff exponentiel pour l'API fanart.tv.

Seules les reponses 429 (rate limiting) sont relancees, avec un delai
croissant et du jitter aleatoire. Un 404 ou une erreur serveur remonte
immediatement : c'est a l'appelant de decider quoi en faire.

Usage:
    @with_retry(max_attempts=5, max_wait=60)
    async def my_api_call():
        ...

    response = await request_with_retry(client, "GET", "/tv/81189")
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand fanart.tv retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """
    Lit le header Retry-After exprime en secondes.

    La forme date HTTP n'est pas exploitee : retourne None.
    """
    if not value:
        return None
    value = value.strip()
    return int(value) if value.isdigit() else None


def _log_retry(state: RetryCallState) -> None:
    """Trace chaque nouvelle tentative apres un 429."""
    logger.debug(
        f"Rate limit fanart.tv, tentative {state.attempt_number} echouee, nouvel essai"
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP
        url: URL ou chemin relatif a la base_url du client
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre deux tentatives (defaut: 60)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
