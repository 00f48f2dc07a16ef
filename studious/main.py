import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from studious.core.config import (
    APP_TITLE,
    APP_VERSION,
    APP_DESCRIPTION,
    CORS_ORIGINS,
    CORS_CREDENTIALS,
    CORS_METHODS,
    CORS_HEADERS,
    DEFAULT_SET_NAME,
    LOG_LEVEL,
)
from studious.api.routes import (
    study_sets,
    flashcards,
    notes,
    timer,
    validation,
    websocket,
)
from studious.services.collection_store import CollectionStore
from studious.services.connection_manager import ConnectionManager
from studious.services.notebook import NoteBook
from studious.services.text_filter import InputValidator
from studious.services.timer import CountdownTimer

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(default_set_name: str = DEFAULT_SET_NAME) -> FastAPI:
    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description=APP_DESCRIPTION
    )

    # CORS setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=CORS_CREDENTIALS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Session state, discarded when the process exits
    validator = InputValidator()
    connections = ConnectionManager()

    async def publish_timer(state):
        await connections.broadcast({"type": "timer_state", "payload": state.model_dump()})

    app.state.validator = validator
    app.state.store = CollectionStore(validator, default_set_name=default_set_name)
    app.state.notebook = NoteBook(validator)
    app.state.timer_connections = connections
    app.state.timer = CountdownTimer(on_change=publish_timer)

    # Include routers
    app.include_router(study_sets.router)
    app.include_router(flashcards.router)
    app.include_router(notes.router)
    app.include_router(timer.router)
    app.include_router(validation.router)
    app.include_router(websocket.router)

    @app.get("/")
    async def root():
        return {
            "success": True,
            "message": "Studious API is running!",
            "version": APP_VERSION,
            "endpoints": "/docs for API documentation"
        }

    logger.info(f"{APP_TITLE} {APP_VERSION} ready (default set '{default_set_name}')")
    return app


app = create_app()

# Local development:
# uvicorn studious.main:app --host 0.0.0.0 --port 8000 --reload
