"""
Platform Pricing - delivery platform markups

Every price shown on DoorDash, UberEats and GrubHub is the restaurant's base
price times a fixed multiplier, rounded half-up to the cent.
"""
import math
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Dict, List, Mapping, Optional, Tuple

CENT = Decimal('0.01')

PLATFORMS = ('doordash', 'ubereats', 'grubhub')

PLATFORM_MARKUPS: Dict[str, Decimal] = {
    'doordash': Decimal('1.35'),   # 35% markup
    'ubereats': Decimal('1.35'),   # 35% markup
    'grubhub': Decimal('1.215'),   # 21.5% markup
}

# Menu sections carrying a basePrice; sauces and settings are passed through
PRICED_SECTIONS = ('wings', 'combos', 'beverages')
PRICED_SIDES = ('fries', 'mozzarella')


class InvalidArgument(ValueError):
    """Raised for a negative or non-numeric price or an unknown platform"""


def to_decimal(value) -> Decimal:
    """
    Convert a price to Decimal through its decimal string form, so 2.49 is
    exactly 2.49 and not the nearest binary double.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidArgument(f"Price must be a number, got {value!r}")
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise InvalidArgument(f"Price must be finite, got {value!r}")
        price = Decimal(str(value))
    elif isinstance(value, str):
        try:
            price = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidArgument(f"Price must be a number, got {value!r}")
    else:
        raise InvalidArgument(f"Price must be a number, got {type(value).__name__}")

    if not price.is_finite():
        raise InvalidArgument(f"Price must be finite, got {value!r}")
    return price


def round2(value) -> Decimal:
    """Round to two decimal places, half-up"""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def _base_price(value) -> Decimal:
    price = to_decimal(value)
    if price < 0:
        raise InvalidArgument(f"Base price must be non-negative, got {value!r}")
    return price


def get_platform_markup(platform: str, markup_table: Mapping[str, Decimal] = PLATFORM_MARKUPS) -> Decimal:
    """Get the multiplier for a platform"""
    key = (platform or '').strip().lower()
    if key not in markup_table:
        raise InvalidArgument(
            f"Unknown platform '{platform}'. Use one of: {', '.join(markup_table)}"
        )
    return to_decimal(markup_table[key])


def propagate(base_price, markup_table: Mapping[str, Decimal] = PLATFORM_MARKUPS) -> Dict[str, Decimal]:
    """
    Compute the price shown on each platform.

    Args:
        base_price: Restaurant price in dollars (non-negative)
        markup_table: Platform -> multiplier

    Returns:
        Dict of platform -> price rounded to the cent
    """
    price = _base_price(base_price)
    return {
        platform: round2(price * to_decimal(multiplier))
        for platform, multiplier in markup_table.items()
    }


def platform_price(base_price, platform: str, markup_table: Mapping[str, Decimal] = PLATFORM_MARKUPS) -> Decimal:
    """Price on a single platform"""
    price = _base_price(base_price)
    return round2(price * get_platform_markup(platform, markup_table))


def to_store(prices: Mapping[str, Decimal]) -> Dict[str, float]:
    """Firestore has no decimal type; store prices as floats"""
    return {platform: float(value) for platform, value in prices.items()}


def price_variant(variant: dict, base_price=None, markup_table: Mapping[str, Decimal] = PLATFORM_MARKUPS) -> dict:
    """
    Copy of a variant with basePrice (optionally replaced) and platformPricing
    recomputed from it.
    """
    priced = dict(variant)
    price = base_price if base_price is not None else variant.get('basePrice')
    priced['basePrice'] = float(_base_price(price))
    priced['platformPricing'] = to_store(propagate(price, markup_table))
    return priced


def _same_price(stored, expected: Decimal) -> bool:
    try:
        return round2(to_decimal(stored)) == expected
    except InvalidArgument:
        return False


def find_price_drift(variants: List[dict], markup_table: Mapping[str, Decimal] = PLATFORM_MARKUPS) -> List[Tuple[str, str, Optional[float], Optional[float]]]:
    """
    Find variants whose stored platform prices disagree with their basePrice.

    A variant whose basePrice is itself invalid (negative, non-numeric) is
    reported as (variant id, 'basePrice', stored basePrice, None).

    Returns:
        List of (variant id, platform, stored price or None, expected price)
    """
    drift = []
    for variant in variants:
        if variant.get('basePrice') is None:
            continue
        try:
            expected = propagate(variant['basePrice'], markup_table)
        except InvalidArgument:
            drift.append((variant.get('id', ''), 'basePrice', variant['basePrice'], None))
            continue
        stored = variant.get('platformPricing') or {}
        for platform, price in expected.items():
            current = stored.get(platform)
            if current is None or not _same_price(current, price):
                drift.append((variant.get('id', ''), platform, current, float(price)))
    return drift


def _with_platform_price(items, markup: Decimal):
    processed = []
    for item in items or []:
        entry = dict(item)
        if entry.get('basePrice') is not None:
            entry['platformPrice'] = float(round2(_base_price(entry['basePrice']) * markup))
        processed.append(entry)
    return processed


def process_platform_menu(menu_data: dict, platform: str, markup_table: Mapping[str, Decimal] = PLATFORM_MARKUPS) -> dict:
    """
    Apply one platform's markup to a complete menu.

    Args:
        menu_data: Dict with wings, combos, sides {fries, mozzarella},
            beverages, sauces and settings
        platform: doordash, ubereats or grubhub

    Returns:
        Processed menu with platformPrice on every priced entry
    """
    markup = get_platform_markup(platform, markup_table)
    sides = menu_data.get('sides') or {}

    processed = {section: _with_platform_price(menu_data.get(section), markup) for section in PRICED_SECTIONS}
    processed['sides'] = {side: _with_platform_price(sides.get(side), markup) for side in PRICED_SIDES}
    processed['sauces'] = menu_data.get('sauces', [])
    processed['settings'] = menu_data.get('settings', {})
    processed['platform'] = platform.strip().lower()
    processed['markup'] = float(markup)
    return processed
