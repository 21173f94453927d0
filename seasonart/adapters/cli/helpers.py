"""
Utilitaires partages pour les commandes CLI de SeasonArt.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container et liberant ses ressources
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

from seasonart.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("seasonart")
    try:
        yield
    finally:
        loguru_logger.enable("seasonart")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le client HTTP et le cache disque sont fermes a la sortie,
    meme en cas d'erreur.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.fanart_client().close()
                container.api_cache().close()
        return wrapper
    return decorator
