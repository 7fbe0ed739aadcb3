from flask import Blueprint

main = Blueprint('main', __name__)


@main.route('/')
def index():
    # Liveness check, independent of the game protocol
    return 'OK'
