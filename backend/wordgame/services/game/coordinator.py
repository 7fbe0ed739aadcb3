import logging
import threading

from wordgame.errors import EmptyWord, NotEnoughPlayers, OpponentMissing
from wordgame.models import FINISHED, IN_GAME, MAX_PLAYERS, Player, Round
from .matching import words_match

logger = logging.getLogger(__name__)


class SessionCoordinator:
    """Applies lobby commands and broadcasts the resulting state.

    Every public operation runs as one step under a single lock: the lobby
    is mutated first and events are sent once the mutation is complete.
    Rejected commands raise a ``LobbyError`` before any state changes,
    except ``OpponentMissing`` which leaves the submitted word recorded.
    Commands from a connection that is not in any lobby are ignored.
    """

    def __init__(self, registry, transport, default_name: str = 'Player'):
        self.registry = registry
        self.transport = transport
        self.default_name = default_name
        self._lock = threading.Lock()

    def join_lobby(self, connection: str, lobby_id: str, name: str) -> None:
        with self._lock:
            clean = (name or '').strip() or self.default_name
            lobby = self.registry.add_player(lobby_id, Player(connection=connection, name=clean))
            self.transport.subscribe(connection, lobby.id)
            logger.info(f"[join] lobby={lobby.id} sid={connection} name={clean!r} players={len(lobby.players)}")
            self._broadcast_state(lobby)

    def start_game(self, connection: str) -> None:
        with self._lock:
            lobby = self.registry.lobby_for(connection)
            if lobby is None:
                return
            if len(lobby.players) < MAX_PLAYERS:
                raise NotEnoughPlayers()
            lobby.status = IN_GAME
            lobby.rounds = []
            lobby.pending_words = {}
            logger.info(f"[start] lobby={lobby.id} by={connection}")
            self.transport.send('game-started', {'lobbyId': lobby.id}, to=lobby.id)

    def submit_word(self, connection: str, raw_word: str) -> None:
        with self._lock:
            lobby = self.registry.lobby_for(connection)
            if lobby is None or lobby.status != IN_GAME:
                return
            clean = (raw_word or '').strip()
            if not clean:
                raise EmptyWord()
            lobby.pending_words[connection] = clean
            if len(lobby.pending_words) < MAX_PLAYERS:
                self.transport.send('waiting-for-opponent', to=connection)
                return
            self._resolve_round(lobby)

    def restart_game(self, connection: str) -> None:
        with self._lock:
            lobby = self.registry.lobby_for(connection)
            if lobby is None:
                return
            lobby.reset()
            logger.info(f"[restart] lobby={lobby.id} by={connection}")
            self._broadcast_state(lobby)
            self.transport.send('game-restarted', to=lobby.id)

    def disconnect(self, connection: str) -> None:
        with self._lock:
            lobby = self.registry.remove_player(connection)
            if lobby is None:
                return
            # Any departure ends the match for whoever is left
            lobby.reset()
            self.transport.unsubscribe(connection, lobby.id)
            logger.info(f"[leave] lobby={lobby.id} sid={connection} remaining={len(lobby.players)}")
            self._broadcast_state(lobby)

    def snapshots(self, include_rounds=False):
        with self._lock:
            return [lobby.to_dict(include_rounds=include_rounds) for lobby in self.registry.all()]

    def snapshot(self, lobby_id: str, include_rounds=True):
        with self._lock:
            return self.registry.get(lobby_id).to_dict(include_rounds=include_rounds)

    def _resolve_round(self, lobby) -> None:
        if len(lobby.players) < MAX_PLAYERS:
            raise OpponentMissing()
        first, second = lobby.players
        word1 = lobby.pending_words.get(first.connection)
        word2 = lobby.pending_words.get(second.connection)
        if word1 is None or word2 is None:
            raise OpponentMissing()

        lobby.rounds.append(Round(word1=word1, word2=word2))
        lobby.pending_words = {}
        round_number = len(lobby.rounds)

        if words_match(word1, word2):
            lobby.status = FINISHED
            logger.info(f"[finish] lobby={lobby.id} rounds={round_number} word={word1!r}")
            self.transport.send('game-ended', {
                'rounds': lobby.rounds_to_list(),
                'totalRounds': round_number,
                'finalWord': word1,
            }, to=lobby.id)
        else:
            logger.info(f"[round] lobby={lobby.id} n={round_number} words={word1!r}/{word2!r}")
            self.transport.send('round-updated', {
                'latestPair': {'word1': word1, 'word2': word2},
                'rounds': lobby.rounds_to_list(),
                'roundNumber': round_number,
            }, to=lobby.id)

    def _broadcast_state(self, lobby) -> None:
        self.transport.send('lobby-state', lobby.to_dict(), to=lobby.id)
