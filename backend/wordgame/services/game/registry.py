from typing import Dict, Iterable, List, Optional

from wordgame.errors import AlreadyInLobby, LobbyFull, LobbyNotFound
from wordgame.models import Lobby, Player


class LobbyRegistry:
    """The fixed pool of lobbies plus a connection -> lobby reverse index.

    Player list mutations go through ``add_player``/``remove_player`` so the
    index never drifts from the lobbies it describes.
    """

    def __init__(self, lobby_ids: Iterable[str]):
        self._lobbies: Dict[str, Lobby] = {}
        for lobby_id in lobby_ids:
            if lobby_id not in self._lobbies:
                self._lobbies[lobby_id] = Lobby(id=lobby_id)
        self._membership: Dict[str, str] = {}

    def all(self) -> List[Lobby]:
        return list(self._lobbies.values())

    def get(self, lobby_id: str) -> Lobby:
        lobby = self._lobbies.get(lobby_id)
        if lobby is None:
            raise LobbyNotFound()
        return lobby

    def lobby_for(self, connection: str) -> Optional[Lobby]:
        lobby_id = self._membership.get(connection)
        if lobby_id is None:
            return None
        return self._lobbies[lobby_id]

    def add_player(self, lobby_id: str, player: Player) -> Lobby:
        lobby = self.get(lobby_id)
        if lobby.is_full:
            raise LobbyFull()
        if player.connection in self._membership:
            raise AlreadyInLobby()
        lobby.players.append(player)
        self._membership[player.connection] = lobby.id
        return lobby

    def remove_player(self, connection: str) -> Optional[Lobby]:
        lobby = self.lobby_for(connection)
        if lobby is None:
            return None
        lobby.players = [p for p in lobby.players if p.connection != connection]
        del self._membership[connection]
        return lobby
