class LobbyError(Exception):
    """Base class for rejected lobby commands.

    The message is human readable and is sent verbatim to the originating
    connection as an ``error-message`` event.
    """

    message = 'Something went wrong.'

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class LobbyNotFound(LobbyError):
    message = 'Lobby does not exist.'


class LobbyFull(LobbyError):
    message = 'Lobby full.'


class AlreadyInLobby(LobbyError):
    message = 'Already in a lobby.'


class NotEnoughPlayers(LobbyError):
    message = 'Need two players to start.'


class EmptyWord(LobbyError):
    message = 'Word cannot be empty.'


class OpponentMissing(LobbyError):
    message = 'Opponent left the game.'
