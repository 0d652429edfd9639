# tests/conftest.py
import pytest

from marvelapi.builder import RequestBuilder
from marvelapi.client import MarvelClient

PUB = "PUB"
PRIV = "PRIV"
TS = "TS"

MARVEL_ENV = (
    "MARVEL_PUBLIC_KEY",
    "MARVEL_PRIVATE_KEY",
    "MARVEL_API_BASE",
    "MARVEL_TIMEOUT",
    "MARVEL_MAX_WORKERS",
)


@pytest.fixture(autouse=True)
def clean_marvel_env(monkeypatch):
    # a developer's .env must not leak into the tests
    for name in MARVEL_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def builder():
    return RequestBuilder(PUB, PRIV, clock=lambda: TS)


@pytest.fixture
def client():
    c = MarvelClient(PUB, PRIV, clock=lambda: TS)
    yield c
    c.close()
