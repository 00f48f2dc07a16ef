import os
import sys

import pytest
from fastapi.testclient import TestClient

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from studious.main import create_app
from studious.services.collection_store import CollectionStore
from studious.services.notebook import NoteBook
from studious.services.text_filter import InputValidator
from studious.services.timer import CountdownTimer


@pytest.fixture
def validator():
    return InputValidator()


@pytest.fixture
def store(validator):
    return CollectionStore(validator, default_set_name="Default Set")


@pytest.fixture
def notebook(validator):
    return NoteBook(validator)


@pytest.fixture
def timer():
    return CountdownTimer(hours=0, minutes=0, seconds=3)


@pytest.fixture
def app():
    return create_app(default_set_name="Default Set")


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
