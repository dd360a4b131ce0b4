"""Pytest config: PYTHONPATH, env isolation and shared CocktailDB fakes."""
import json
import sys
from pathlib import Path

import httpx
import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))

from core.config import ServerConfig  # noqa: E402

_MARGARITA = {
    "idDrink": "11007",
    "strDrink": "Margarita",
    "strCategory": "Ordinary Drink",
    "strAlcoholic": "Alcoholic",
    "strGlass": "Cocktail glass",
    "strInstructions": "Rub the rim of the glass with the lime slice to make the salt stick to it.",
    "strIngredient1": "Tequila",
    "strIngredient2": "Triple sec",
    "strIngredient3": "Lime juice",
    "strIngredient4": "Salt",
    "strIngredient5": None,
    "strMeasure1": "1 1/2 oz ",
    "strMeasure2": "1/2 oz ",
    "strMeasure3": "1 oz ",
    "strMeasure4": None,
    "strMeasure5": None,
}

_GIN_FIZZ = {
    "strDrink": "Gin Fizz",
    "strCategory": "Ordinary Drink",
    "strAlcoholic": "Alcoholic",
    "strGlass": "Highball glass",
    "strInstructions": "Shake with ice and strain.",
    "strIngredient1": "Gin",
    "strMeasure1": "2 oz",
}


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for var in ("COCKTAILDB_BASE_URL", "COCKTAILDB_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config():
    return ServerConfig(base_url="https://cocktails.test/api/json/v1/1", timeout_sec=1.0)


class FakeCocktailDB:
    """Records every request and answers with a canned response.

    payload may be a callable taking the request, for per-query answers.
    """

    def __init__(self, status_code=200, payload=None, body=None, error=None):
        self.status_code = status_code
        self.payload = payload
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        payload = self.payload(request) if callable(self.payload) else self.payload
        return httpx.Response(self.status_code, content=json.dumps(payload).encode())

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def fake_db():
    """Factory: fake_db(payload={...}) -> (FakeCocktailDB, httpx.Client)."""
    clients = []

    def make(**kwargs):
        fake = FakeCocktailDB(**kwargs)
        client = fake.client()
        clients.append(client)
        return fake, client

    yield make
    for client in clients:
        client.close()


@pytest.fixture
def margarita():
    return dict(_MARGARITA)


@pytest.fixture
def gin_fizz():
    return dict(_GIN_FIZZ)
