import pytest
from google.api_core.exceptions import ServiceUnavailable

from postsync.config import StoreConfig


class FakeSnapshot:
    def __init__(self, data):
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, store, collection, doc_id):
        self.store = store
        self.collection = collection
        self.doc_id = doc_id

    def set(self, data, merge=False):
        self.store.attempts.append((self.collection, self.doc_id))
        if self.store.fail_on == len(self.store.attempts):
            raise ServiceUnavailable("write rejected")
        self.store.docs[(self.collection, self.doc_id)] = dict(data)

    def get(self):
        return FakeSnapshot(self.store.docs.get((self.collection, self.doc_id)))


class FakeCollection:
    def __init__(self, store, name):
        self.store = store
        self.name = name

    def document(self, doc_id):
        return FakeDocument(self.store, self.name, doc_id)


class FakeClient:
    def __init__(self, store):
        self.store = store
        self.closed = False

    def collection(self, name):
        return FakeCollection(self.store, name)

    def close(self):
        self.closed = True


class FakeFirestore:
    """In-memory stand-in for a Firestore project; fail_on is a 1-indexed write attempt."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.docs = {}
        self.attempts = []
        self.clients = []

    def client_factory(self, config):
        client = FakeClient(self)
        self.clients.append(client)
        return client


@pytest.fixture()
def fake_firestore():
    return FakeFirestore()


@pytest.fixture()
def store_config():
    return StoreConfig(project="demo-project")
