"""
Shared pytest fixtures: an in-memory stand-in for the Firestore client
"""
import copy

import pytest
from google.api_core.exceptions import NotFound

from firebase_service import FirebaseService


class FakeSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, store, collection, doc_id):
        self._store = store
        self._collection = collection
        self.id = doc_id

    def _docs(self):
        return self._store.setdefault(self._collection, {})

    def get(self):
        return FakeSnapshot(self, self._docs().get(self.id))

    def set(self, data, merge=False):
        existing = self._docs().get(self.id)
        if merge and existing is not None:
            existing.update(copy.deepcopy(data))
        else:
            self._docs()[self.id] = copy.deepcopy(data)

    def update(self, data):
        if self.id not in self._docs():
            raise NotFound(f"No document to update: {self._collection}/{self.id}")
        self._docs()[self.id].update(copy.deepcopy(data))

    def delete(self):
        self._docs().pop(self.id, None)


class FakeQuery:
    def __init__(self, store, collection, filters=()):
        self._store = store
        self._collection = collection
        self._filters = list(filters)

    def where(self, field, op, value):
        assert op == '==', f"unsupported operator {op}"
        return FakeQuery(self._store, self._collection, self._filters + [(field, value)])

    def stream(self):
        for doc_id, data in list(self._store.get(self._collection, {}).items()):
            if all(data.get(field) == value for field, value in self._filters):
                yield FakeSnapshot(FakeDocumentReference(self._store, self._collection, doc_id), data)


class FakeCollectionReference(FakeQuery):
    def __init__(self, store, collection):
        super().__init__(store, collection)
        self.id = collection

    def document(self, doc_id):
        return FakeDocumentReference(self._store, self._collection, doc_id)


class FakeBatch:
    def __init__(self, db):
        self._db = db
        self._ops = []

    def set(self, reference, data, merge=False):
        self._ops.append(lambda: reference.set(data, merge=merge))

    def delete(self, reference):
        self._ops.append(reference.delete)

    def commit(self):
        assert len(self._ops) <= 500, "batch too large"
        self._db.commits += 1
        for op in self._ops:
            op()
        self._ops = []


class FakeFirestore:
    def __init__(self, data=None):
        self.store = copy.deepcopy(data or {})
        self.commits = 0

    def collection(self, name):
        return FakeCollectionReference(self.store, name)

    def collections(self):
        return [FakeCollectionReference(self.store, name) for name, docs in self.store.items() if docs]

    def batch(self):
        return FakeBatch(self)


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def firebase(fake_db):
    return FirebaseService(fake_db)


@pytest.fixture
def desserts_db():
    return FakeFirestore({
        'desserts': {
            'red_velvet_cake': {
                'id': 'red_velvet_cake',
                'name': 'Red Velvet Cake',
                'active': True,
                'variants': [{
                    'id': 'red_velvet_slice',
                    'name': 'Red Velvet Cake',
                    'slices': 1,
                    'basePrice': 3.5,
                    'platformPricing': {'doordash': 4.73, 'ubereats': 4.73, 'grubhub': 4.25},
                }],
            },
            'ny_cheesecake': {
                'id': 'ny_cheesecake',
                'name': 'New York Cheesecake',
                'active': True,
                'variants': [{
                    'id': 'ny_cheesecake_slice',
                    'name': 'New York Cheesecake',
                    'slices': 1,
                    'basePrice': 4.75,
                    # grubhub left over from the old $4.00 price
                    'platformPricing': {'doordash': 6.41, 'ubereats': 6.41, 'grubhub': 4.86},
                }],
            },
        },
        'menuItems': {
            'Xk2fries': {
                'id': 'fries',
                'name': 'Fries',
                'category': 'fries',
                'variants': [{
                    'id': 'fries_large',
                    'name': 'Large Fries',
                    'size': 'large',
                    'basePrice': 3.75,
                    'platformPricing': {'doordash': 5.06, 'ubereats': 5.06, 'grubhub': 4.56},
                }],
            },
        },
    })


@pytest.fixture
def desserts_firebase(desserts_db):
    return FirebaseService(desserts_db)
