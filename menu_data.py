"""
Seed catalogue for the Philly Wings Express menu.

Only base prices are listed; platform pricing is computed at seed time.
"""

IMAGE_BASE_URL = 'https://firebasestorage.googleapis.com/v0/b/philly-wings.firebasestorage.app/o/images%2Fresized%2F'


def image_url(name, size='800x800'):
    """Firebase Storage URL of a resized webp image"""
    return f"{IMAGE_BASE_URL}{name}_{size}.webp?alt=media"


DESSERTS = {
    'marble_pound_cake': {
        'id': 'marble_pound_cake',
        'name': 'Marble Pound Cake',
        'category': 'desserts',
        'imageUrl': image_url('marble-pound-cake'),
        'active': True,
        'variants': [
            {'id': 'pound_cake_slice', 'name': 'Marble Pound Cake Slice', 'count': 1, 'basePrice': 3.50},
        ],
    },
    'gourmet_brownies': {
        'id': 'gourmet_brownies',
        'name': 'Gourmet Brownies',
        'category': 'desserts',
        'imageUrl': image_url('gourmet-brownies'),
        'active': True,
        'variants': [
            {'id': 'brownie_single', 'name': 'Gourmet Brownie', 'count': 1, 'basePrice': 4.00},
        ],
    },
    'creme_brulee_cheesecake': {
        'id': 'creme_brulee_cheesecake',
        'name': 'Crème Brûlée Cheesecake',
        'category': 'desserts',
        'imageUrl': image_url('creme-brulee-cheesecake'),
        'active': True,
        'variants': [
            {'id': 'cheesecake_slice', 'name': 'Crème Brûlée Cheesecake', 'slices': 1, 'basePrice': 5.00},
        ],
    },
    'red_velvet_cake': {
        'id': 'red_velvet_cake',
        'name': 'Red Velvet Cake',
        'category': 'desserts',
        'imageUrl': image_url('red-velvet-cake'),
        'active': True,
        'variants': [
            {'id': 'red_velvet_slice', 'name': 'Red Velvet Cake', 'slices': 1, 'basePrice': 4.75},
        ],
    },
    'ny_cheesecake': {
        'id': 'ny_cheesecake',
        'name': 'New York Cheesecake',
        'category': 'desserts',
        'imageUrl': image_url('new-york-cheesecake'),
        'active': True,
        'variants': [
            {'id': 'ny_cheesecake_slice', 'name': 'New York Cheesecake', 'slices': 1, 'basePrice': 4.75},
        ],
    },
}

COLD_SIDES = {
    'veggie_sticks': {
        'id': 'veggie_sticks',
        'name': 'Veggie Sticks',
        'category': 'cold-sides',
        'description': 'Fresh carrot and celery sticks with your choice of dip',
        'imageUrl': image_url('carrot-celery-sticks'),
        'active': True,
        'variants': [
            {'id': 'veggie_sticks_regular', 'name': 'Veggie Sticks', 'size': 'regular', 'basePrice': 3.50},
        ],
    },
}

FRESH_SALADS = {
    'spring_mix_salad': {
        'id': 'spring_mix_salad',
        'name': 'Spring Mix Salad',
        'category': 'salads',
        'description': 'Spring mix, cucumbers, cherry tomatoes and carrots',
        'imageUrl': image_url('garden-salad'),
        'active': True,
        'variants': [
            {'id': 'spring_mix_regular', 'name': 'Spring Mix Salad', 'size': 'regular', 'basePrice': 6.99},
        ],
    },
}

MENU_ITEMS = {
    'fries': {
        'id': 'fries',
        'name': 'Fries',
        'category': 'fries',
        'active': True,
        'variants': [
            {'id': 'fries_original', 'name': 'Original Fries', 'size': 'small',
             'description': 'Golden crispy fries - original size', 'basePrice': 2.75},
            {'id': 'fries_large', 'name': 'Large Fries', 'size': 'large',
             'description': 'Golden crispy fries - large size', 'basePrice': 3.75},
        ],
    },
}

PLANT_BASED_WINGS = {
    'cauliflower': {
        'id': 'cauliflower',
        'name': 'Cauliflower Wings',
        'category': 'plant-based',
        'active': True,
        'variants': [
            {'id': 'cauliflower_6', 'name': '6 Cauliflower Wings', 'count': 6, 'prepMethod': 'fried', 'basePrice': 7.99},
            {'id': 'cauliflower_12', 'name': '12 Cauliflower Wings', 'count': 12, 'prepMethod': 'fried', 'basePrice': 13.99},
            {'id': 'cauliflower_24', 'name': '24 Cauliflower Wings', 'count': 24, 'prepMethod': 'fried', 'basePrice': 25.99},
            {'id': 'cauliflower_6_wet', 'name': '6 Cauliflower Wings (Sauced)', 'count': 6, 'prepMethod': 'baked', 'basePrice': 7.99},
            {'id': 'cauliflower_12_wet', 'name': '12 Cauliflower Wings (Sauced)', 'count': 12, 'prepMethod': 'baked', 'basePrice': 13.99},
            {'id': 'cauliflower_24_wet', 'name': '24 Cauliflower Wings (Sauced)', 'count': 24, 'prepMethod': 'baked', 'basePrice': 25.99},
        ],
    },
}

SEED_COLLECTIONS = {
    'desserts': DESSERTS,
    'coldSides': COLD_SIDES,
    'freshSalads': FRESH_SALADS,
    'menuItems': MENU_ITEMS,
    'plantBasedWings': PLANT_BASED_WINGS,
}
