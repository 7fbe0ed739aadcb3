"""Game domain services: word matching, lobby registry and coordination.

This package contains the in-memory game logic imported by Socket.IO
handlers and HTTP routes, keeping transport concerns separated from core
game mechanics.
"""

from .coordinator import SessionCoordinator
from .matching import edit_distance, normalize_word, words_match
from .registry import LobbyRegistry
from .transport import SocketIOTransport

__all__ = [
    'LobbyRegistry',
    'SessionCoordinator',
    'SocketIOTransport',
    'edit_distance',
    'normalize_word',
    'words_match',
]
