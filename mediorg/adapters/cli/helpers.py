"""
Utilitaires partages pour les commandes CLI de MediOrg.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container initialise
- apply_overrides : surcharge de la configuration par les options CLI
"""

from functools import wraps
from typing import Any

from rich.console import Console

from mediorg.container import Container

console = Console()


def with_container():
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container()
        def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def apply_overrides(container: Container, **options: Any) -> None:
    """
    Surcharge la configuration du container avec les options CLI fournies.

    Les options a None (non passees sur la ligne de commande) conservent
    la valeur de la configuration.
    """
    updates = {key: value for key, value in options.items() if value is not None}
    if not updates:
        return
    settings = container.config()
    container.config.override(settings.model_copy(update=updates))
