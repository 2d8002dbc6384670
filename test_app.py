"""
Tests for the site server and the platform menu API
"""
import pytest

from app import create_app
from config import Config
from firebase_service import FirebaseService
from conftest import FakeFirestore

MENU = {
    'combos': {'mvp': {'id': 'mvp', 'name': 'MVP Meal', 'basePrice': 19.99}},
    'menuItems': {
        'w6': {'id': '6-wings', 'category': 'wings', 'basePrice': 8.99},
        'f1': {'id': 'fries', 'category': 'fries', 'basePrice': 3.75},
        'm1': {'id': 'mozz', 'category': 'mozzarella-sticks', 'basePrice': 6.49},
    },
    'beverages': {'lemonade': {'id': 'lemonade', 'basePrice': 2.5}},
    'sauces': {'mild-buffalo': {'id': 'mild-buffalo', 'name': 'Mild Buffalo'}},
    'settings': {'general': {'restaurantName': 'Philly Wings Express'}},
}


@pytest.fixture
def dist(tmp_path):
    (tmp_path / 'assets').mkdir()
    (tmp_path / 'assets' / 'main.js').write_text('console.log("wings")')
    (tmp_path / 'admin').mkdir()
    (tmp_path / 'admin' / 'index.html').write_text('<h1>Admin</h1>')
    (tmp_path / 'admin' / 'platform-menu.html').write_text('<h1>Platform Menu</h1>')
    (tmp_path / 'index.html').write_text('<div id="app"></div>')
    return tmp_path


@pytest.fixture
def menu_db():
    return FakeFirestore(MENU)


@pytest.fixture
def client(dist, menu_db):
    class TestConfig(Config):
        TESTING = True
        DIST_DIR = str(dist)

    app = create_app(TestConfig, firebase_service=FirebaseService(menu_db))
    return app.test_client()


def test_health(client):
    response = client.get('/api/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'healthy', 'firebase_connected': True}


def test_static_assets(client):
    response = client.get('/assets/main.js')
    assert response.status_code == 200
    assert b'wings' in response.data


def test_admin_pages(client):
    assert b'Admin' in client.get('/admin').data
    assert b'Platform Menu' in client.get('/admin/platform-menu.html').data


def test_spa_fallback(client):
    for path in ('/', '/menu', '/catering/boxed-meals'):
        response = client.get(path)
        assert response.status_code == 200
        assert b'id="app"' in response.data


def test_unknown_api_route_is_json_404(client):
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Endpoint not found'}


def test_platform_menu(client):
    response = client.get('/api/platform-menu/doordash', headers={'Origin': 'https://www.doordash.com'})
    assert response.status_code == 200
    assert response.headers['Cache-Control'] == Config.PLATFORM_MENU_CACHE_CONTROL
    assert response.headers['Access-Control-Allow-Origin'] == 'https://www.doordash.com'

    menu = response.get_json()
    assert menu['platform'] == 'doordash'
    assert menu['markup'] == 1.35
    assert menu['wings'][0]['platformPrice'] == 12.14
    assert menu['combos'][0]['platformPrice'] == 26.99
    assert menu['sides']['fries'][0]['platformPrice'] == 5.06
    assert menu['sides']['mozzarella'][0]['platformPrice'] == 8.76
    assert menu['beverages'][0]['platformPrice'] == 3.38
    assert menu['settings'] == {'restaurantName': 'Philly Wings Express'}


def test_platform_menu_is_case_insensitive(client):
    assert client.get('/api/platform-menu/GrubHub').get_json()['platform'] == 'grubhub'


def test_platform_menu_invalid_platform(client):
    response = client.get('/api/platform-menu/postmates')
    assert response.status_code == 400
    assert 'Invalid platform' in response.get_json()['error']


def test_publish_platform_menu(client, menu_db):
    response = client.post('/api/platform-menu/ubereats/publish', json={})
    assert response.status_code == 201

    body = response.get_json()
    assert body['success'] is True
    assert body['itemCount'] == {'combos': 1, 'wings': 1, 'beverages': 1, 'sauces': 1}

    stored = menu_db.store['publishedMenus'][body['id']]
    assert stored['platform'] == 'ubereats'
    assert stored['filename'] == body['filename']


def test_publish_rejects_bad_snapshot(client):
    response = client.post('/api/platform-menu/ubereats/publish', json={'snapshot': [1, 2]})
    assert response.status_code == 400


def test_platform_menu_omits_internal_keys(client):
    menu = client.get('/api/platform-menu/doordash').get_json()

    assert menu['combos'][0]['id'] == 'mvp'
    assert '_docId' not in menu['combos'][0]
    assert '_docId' not in menu['sides']['fries'][0]


def test_platform_menu_bad_stored_price_is_server_error(client, menu_db):
    menu_db.store['combos']['broken'] = {'id': 'broken', 'name': 'Broken Combo', 'basePrice': -1}

    response = client.get('/api/platform-menu/doordash')

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Internal server error'}


def test_menu_errors_map_to_json(dist, desserts_firebase):
    from services.menu_service import MenuService

    class TestConfig(Config):
        TESTING = True
        DIST_DIR = str(dist)

    app = create_app(TestConfig, firebase_service=desserts_firebase)

    @app.route('/api/desserts/<doc_id>/price/<price>', methods=['PUT'])
    def set_dessert_price(doc_id, price):
        service = MenuService(app.get_firebase_service())
        return {'variants': service.set_base_price('desserts', doc_id, price)}

    client = app.test_client()

    response = client.put('/api/desserts/tiramisu/price/4.00')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'desserts/tiramisu not found'}

    response = client.put('/api/desserts/red_velvet_cake/price/-4')
    assert response.status_code == 400
    assert 'non-negative' in response.get_json()['error']

    response = client.put('/api/desserts/red_velvet_cake/price/4.75')
    assert response.status_code == 200
    assert response.get_json()['variants'][0]['platformPricing']['grubhub'] == 5.77
