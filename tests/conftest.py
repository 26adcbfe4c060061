import pytest

from product_catalog import Settings, create_app


API_KEY = "test-key"


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, api_key_from_env=True)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def store(app):
    return app.extensions["product_store"]


@pytest.fixture
def auth_headers():
    return {"X-API-Key": API_KEY}


@pytest.fixture
def mouse():
    """A valid create payload."""
    return {"name": "  Mouse ", "description": "Wireless mouse", "price": 25, "category": "electronics"}
