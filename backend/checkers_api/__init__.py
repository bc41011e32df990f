"""HTTP session layer serving a single checkers game."""

from .app import create_app
from .session import GameSession

__all__ = ["create_app", "GameSession"]
