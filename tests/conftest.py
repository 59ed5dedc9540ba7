"""Shared test fixtures for the boutique catalog."""

import threading
from urllib.parse import urlsplit

import pytest

from application.catalog_store import CatalogStore
from application.sync import RemoteSyncAdapter
from core.entities import ProductInput
from core.errors import CatalogSyncError
from core.ports import CatalogGateway
from infrastructure.database.models import DatabaseConfig
from infrastructure.database.repositories import SQLiteProductRepository
from infrastructure.web.flask_app import create_app


def make_input(**overrides) -> ProductInput:
    values = dict(
        name="Silk Saree",
        price=1499.0,
        image="https://img.example/saree.jpg",
        category="Saree",
        colors=["Red"],
        sizes=["FREE"],
        description="Handwoven silk",
        features=["Pure Silk"],
    )
    values.update(overrides)
    return ProductInput(**values)


def make_document(**overrides) -> dict:
    doc = make_input().to_document()
    doc.update(overrides)
    return doc


class FakeGateway(CatalogGateway):
    """In-memory CatalogGateway that records calls and can fail or block."""

    def __init__(self, listing=None):
        self.listing = listing if listing is not None else []
        self.calls = []
        self.fail = False
        self.release = threading.Event()
        self.release.set()
        self._next = 0

    def _check(self):
        self.release.wait(timeout=5)
        if self.fail:
            raise CatalogSyncError("service unavailable", status_code=500)

    def list(self):
        self.calls.append(("list",))
        self._check()
        return self.listing

    def create(self, document):
        self.calls.append(("create", document))
        self._check()
        self._next += 1
        return {**document, "_id": f"srv{self._next}"}

    def update(self, product_id, document):
        self.calls.append(("update", product_id, document))
        self._check()
        return {**document, "_id": product_id}

    def delete(self, product_id):
        self.calls.append(("delete", product_id))
        self._check()
        return {"success": True}


class FakeResponse:
    def __init__(self, status_code, data):
        self.status_code = status_code
        self._data = data

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return self._data


class FlaskTestSession:
    """Stands in for requests.Session, routing calls to a Flask test client."""

    def __init__(self, client):
        self.client = client
        self.headers = {}
        self._lock = threading.Lock()

    def request(self, method, url, json=None, params=None, **kwargs):
        path = urlsplit(url).path
        with self._lock:
            resp = self.client.open(path, method=method, json=json, query_string=params)
        return FakeResponse(resp.status_code, resp.get_json(silent=True))


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "catalog.sqlite")


@pytest.fixture
def repository(db_path):
    return SQLiteProductRepository(DatabaseConfig(db_path=db_path))


@pytest.fixture
def app(db_path):
    app = create_app(db_path=db_path)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def sync(gateway):
    adapter = RemoteSyncAdapter(gateway)
    yield adapter
    adapter.close()


@pytest.fixture
def store(sync):
    return CatalogStore(sync)
