import copy

import pytest
from fastapi.testclient import TestClient

from storefront.config import get_db, settings
from storefront.main import app
from storefront.schemas.product import Product


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = copy.deepcopy(data)

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocument:
    def __init__(self, store, doc_id):
        self._store = store
        self.id = doc_id

    def get(self):
        return FakeSnapshot(self, self._store.get(self.id))

    def set(self, data):
        self._store[self.id] = copy.deepcopy(data)

    def delete(self):
        self._store.pop(self.id, None)


class FakeQuery:
    def __init__(self, store, filters=()):
        self._store = store
        self._filters = tuple(filters)

    def where(self, filter):
        return FakeQuery(self._store, self._filters + (filter,))

    def stream(self):
        for doc_id, data in list(self._store.items()):
            if all(data.get(f.field_path) == f.value for f in self._filters):
                yield FakeSnapshot(FakeDocument(self._store, doc_id), data)


class FakeCollection(FakeQuery):
    def document(self, doc_id):
        if "/" in doc_id:
            raise ValueError("A document must have an even number of path elements")
        return FakeDocument(self._store, doc_id)


class FakeFirestore:
    """Just enough of the Firestore client surface for the repositories."""

    def __init__(self):
        self.collections = {}
        self.get_all_calls = 0

    def collection(self, name):
        return FakeCollection(self.collections.setdefault(name, {}))

    def get_all(self, references):
        self.get_all_calls += 1
        return [ref.get() for ref in references]

    def docs(self, name):
        return self.collections.get(settings.collection(name), {})


def put_product(db, **fields) -> Product:
    data = {"name": "Widget", "price": 100, "category": "Other", "stock": 5, **fields}
    product = Product(**data)
    db.collection(settings.collection("products")).document(product.id).set(product.to_doc())
    return product


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def product(db):
    return put_product(db, id="p1")


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
