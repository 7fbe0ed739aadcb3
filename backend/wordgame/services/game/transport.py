from flask_socketio import SocketIO


class SocketIOTransport:
    """Delivers coordinator events over Flask-SocketIO rooms.

    A lobby's broadcast group is the Socket.IO room named after its id.
    """

    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def subscribe(self, connection: str, group: str) -> None:
        self.socketio.server.enter_room(connection, group, namespace=self.namespace)

    def unsubscribe(self, connection: str, group: str) -> None:
        self.socketio.server.leave_room(connection, group, namespace=self.namespace)

    def send(self, event: str, payload=None, to: str = None) -> None:
        # Events without a payload go out with no arguments at all
        if payload is None:
            self.socketio.emit(event, to=to, namespace=self.namespace)
        else:
            self.socketio.emit(event, payload, to=to, namespace=self.namespace)
