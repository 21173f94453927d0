"""Sous-package CLI - re-exporte les commandes publiques."""

from seasonart.adapters.cli.commands import images, refresh

__all__ = [
    "images",
    "refresh",
]
