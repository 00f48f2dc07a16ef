from fastapi import Request, WebSocket

from studious.services.collection_store import CollectionStore
from studious.services.connection_manager import ConnectionManager
from studious.services.notebook import NoteBook
from studious.services.text_filter import InputValidator
from studious.services.timer import CountdownTimer


# Services live on app.state, built once by create_app()
def get_validator(request: Request) -> InputValidator:
    return request.app.state.validator


def get_store(request: Request) -> CollectionStore:
    return request.app.state.store


def get_notebook(request: Request) -> NoteBook:
    return request.app.state.notebook


def get_timer(request: Request) -> CountdownTimer:
    return request.app.state.timer


def get_ws_timer(websocket: WebSocket) -> CountdownTimer:
    return websocket.app.state.timer


def get_ws_manager(websocket: WebSocket) -> ConnectionManager:
    return websocket.app.state.timer_connections


def get_connection_manager(request: Request) -> ConnectionManager:
    return request.app.state.timer_connections
