"""
Tests for seeding the catalogue and copying production into the emulator
"""
import pytest
from google.api_core.exceptions import PermissionDenied, RetryError

from conftest import FakeFirestore
from firebase_service import FirebaseService, MAX_BATCH_SIZE
from menu_data import SEED_COLLECTIONS
from services.pricing import InvalidArgument, find_price_drift
from services.seed_service import SeedService, build_document
from services.sync_service import SyncService


def test_build_document_prices_every_variant():
    document = build_document(SEED_COLLECTIONS['menuItems']['fries'])

    assert [v['id'] for v in document['variants']] == ['fries_original', 'fries_large']
    assert document['variants'][1]['platformPricing'] == {'doordash': 5.06, 'ubereats': 5.06, 'grubhub': 4.56}


def test_seed_all_collections(firebase, fake_db):
    counts = SeedService(firebase).seed()

    assert counts == {name: len(items) for name, items in SEED_COLLECTIONS.items()}
    for name in SEED_COLLECTIONS:
        for doc in fake_db.store[name].values():
            assert find_price_drift(doc['variants']) == []


def test_seed_selected_collection_clears_first(firebase, fake_db):
    fake_db.store['desserts'] = {'old_pie': {'name': 'Old Pie'}}

    SeedService(firebase).seed(['desserts'], clear_existing=True)

    assert 'old_pie' not in fake_db.store['desserts']
    assert set(fake_db.store['desserts']) == set(SEED_COLLECTIONS['desserts'])
    assert 'menuItems' not in fake_db.store


def test_seed_unknown_collection(firebase):
    with pytest.raises(InvalidArgument):
        SeedService(firebase).seed(['pizzas'])


def test_batch_write_splits_large_writes(firebase, fake_db):
    documents = {f"doc{i}": {'n': i} for i in range(MAX_BATCH_SIZE + 1)}

    assert firebase.batch_write('bulk', documents) == MAX_BATCH_SIZE + 1
    assert fake_db.commits == 2
    assert len(fake_db.store['bulk']) == MAX_BATCH_SIZE + 1


@pytest.fixture
def production():
    return FirebaseService(FakeFirestore({
        'desserts': {
            'ny_cheesecake': {'id': 'ny_cheesecake', 'name': 'New York Cheesecake', 'variants': [{'id': 'slice'}]},
            'gourmet_brownies': {'id': 'gourmet_brownies', 'name': 'Gourmet Brownies'},
        },
        'sauces': {'mild-buffalo': {'name': 'Mild Buffalo'}},
    }))


@pytest.fixture
def emulator():
    return FirebaseService(FakeFirestore({
        'desserts': {'stale': {'name': 'Stale'}},
        'settings': {'general': {'open': True}},
    }), emulator=True)


def test_sync_all_collections(production, emulator):
    result = SyncService(production, emulator).sync()

    assert result == {'copied': {'desserts': 2, 'sauces': 1}, 'failed': {}}
    assert set(emulator.db.store['desserts']) == {'ny_cheesecake', 'gourmet_brownies'}
    assert emulator.db.store['sauces']['mild-buffalo'] == {'name': 'Mild Buffalo'}
    # collections absent from production are left alone
    assert emulator.db.store['settings'] == {'general': {'open': True}}


def test_sync_skips_empty_collections(production, emulator):
    result = SyncService(production, emulator).sync(['combos'])

    assert result['copied'] == {'combos': 0}
    assert emulator.db.store['desserts'] == {'stale': {'name': 'Stale'}}


def test_sync_continues_after_a_failure(production, emulator, monkeypatch):
    service = SyncService(production, emulator)
    original = service.sync_collection

    def flaky(collection):
        if collection == 'desserts':
            raise PermissionDenied('missing permissions')
        return original(collection)

    monkeypatch.setattr(service, 'sync_collection', flaky)
    result = service.sync(['desserts', 'sauces'])

    assert result['copied'] == {'sauces': 1}
    assert 'desserts' in result['failed']


def test_sync_continues_after_a_deadline(production, emulator, monkeypatch):
    service = SyncService(production, emulator)
    original = service.sync_collection

    def slow(collection):
        if collection == 'desserts':
            raise RetryError('Deadline exceeded', None)
        return original(collection)

    monkeypatch.setattr(service, 'sync_collection', slow)
    result = service.sync(['desserts', 'sauces'])

    assert result['copied'] == {'sauces': 1}
    assert 'Deadline exceeded' in result['failed']['desserts']
    assert emulator.db.store['sauces']['mild-buffalo'] == {'name': 'Mild Buffalo'}
    assert emulator.db.store['desserts'] == {'stale': {'name': 'Stale'}}
