"""
Menu Service - patch operations on menu documents

Reprices variants, inserts sizes, attaches image URLs and audits stored
platform pricing. Every price goes through services.pricing.
"""
import logging
from collections import defaultdict

from pydantic import ValidationError

from models import MenuVariant
from services.pricing import InvalidArgument, find_price_drift, price_variant

logger = logging.getLogger(__name__)

# Collections the patch scripts may target
MENU_COLLECTIONS = (
    'menuItems',
    'combos',
    'beverages',
    'desserts',
    'coldSides',
    'freshSalads',
    'plantBasedWings',
    'cateringAddOns',
)


class DocumentNotFound(LookupError):
    """Raised when a menu document does not exist"""

    def __init__(self, collection, doc_id):
        super().__init__(f"{collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id


def _validated(variant):
    try:
        return MenuVariant(**variant).to_firestore()
    except ValidationError as e:
        raise InvalidArgument(f"Invalid variant {variant.get('id', '?')}: {e}") from e


class MenuService:
    """Service for patching menu documents"""

    def __init__(self, firebase_service):
        self.firebase = firebase_service

    def get_item(self, collection, doc_id):
        """Get a menu document or raise DocumentNotFound"""
        item = self.firebase.get_document(collection, doc_id)
        if item is None:
            raise DocumentNotFound(collection, doc_id)
        return item

    def _save_variants(self, collection, doc_id, variants):
        self.firebase.update_document(collection, doc_id, {'variants': variants}, touch=True)
        logger.info(f"Saved {len(variants)} variant(s) to {collection}/{doc_id}")
        return variants

    def set_base_price(self, collection, doc_id, base_price, variant_ids=None):
        """
        Set a new base price and recompute platform pricing.

        Args:
            collection: Menu collection
            doc_id: Document ID
            base_price: New base price in dollars
            variant_ids: Only reprice these variants (all when None)

        Returns:
            Updated variant list
        """
        item = self.get_item(collection, doc_id)
        variants = item.get('variants', [])
        selected = set(variant_ids) if variant_ids is not None else None

        if selected is not None:
            missing = selected - {v.get('id') for v in variants}
            if missing:
                raise InvalidArgument(f"Unknown variant(s) in {collection}/{doc_id}: {', '.join(sorted(missing))}")

        updated = []
        for variant in variants:
            if selected is None or variant.get('id') in selected:
                old_price = variant.get('basePrice')
                variant = price_variant(variant, base_price)
                logger.info(
                    f"{collection}/{doc_id} {variant.get('id')}: ${old_price} -> ${variant['basePrice']} "
                    f"{variant['platformPricing']}"
                )
            updated.append(variant)

        return self._save_variants(collection, doc_id, updated)

    def replace_variants(self, collection, doc_id, variants):
        """Replace the variant list; each variant is priced from its basePrice"""
        self.get_item(collection, doc_id)

        ids = [v.get('id') for v in variants]
        if len(ids) != len(set(ids)):
            raise InvalidArgument(f"Duplicate variant ids for {collection}/{doc_id}: {ids}")

        priced = [_validated(price_variant(v)) for v in variants]
        return self._save_variants(collection, doc_id, priced)

    def add_variant(self, collection, doc_id, variant, position='end'):
        """
        Add a priced variant to a document.

        Args:
            position: 'start' to show it first (e.g. a small size), 'end' to append
        """
        if position not in ('start', 'end'):
            raise InvalidArgument(f"position must be 'start' or 'end', got {position!r}")

        item = self.get_item(collection, doc_id)
        variants = list(item.get('variants', []))
        if any(v.get('id') == variant.get('id') for v in variants):
            raise InvalidArgument(f"Variant {variant.get('id')} already exists in {collection}/{doc_id}")

        priced = _validated(price_variant(variant))
        if position == 'start':
            variants.insert(0, priced)
        else:
            variants.append(priced)

        logger.info(f"Added variant {priced['id']} to {collection}/{doc_id} ({len(variants)} total)")
        return self._save_variants(collection, doc_id, variants)

    def patch_variants(self, collection, doc_id, updates):
        """
        Merge field updates into variants.

        Args:
            updates: Dict of variant id -> fields to set

        Returns:
            Tuple of (updated variant list, ids that were not found)
        """
        item = self.get_item(collection, doc_id)
        patched = []
        seen = set()
        for variant in item.get('variants', []):
            fields = updates.get(variant.get('id'))
            if fields:
                if 'basePrice' in fields:
                    raise InvalidArgument("Use set_base_price to change basePrice")
                variant = {**variant, **fields}
                seen.add(variant['id'])
            patched.append(variant)

        missing = sorted(set(updates) - seen)
        if missing:
            logger.warning(f"Variants not found in {collection}/{doc_id}: {', '.join(missing)}")

        self._save_variants(collection, doc_id, patched)
        return patched, missing

    def set_image_urls(self, collection, urls):
        """
        Attach image URLs to documents.

        Args:
            urls: Dict of doc_id -> imageUrl

        Returns:
            List of updated document IDs
        """
        updated = []
        for doc_id, image_url in urls.items():
            self.firebase.update_document(collection, doc_id, {'imageUrl': image_url})
            logger.info(f"Updated image for {collection}/{doc_id}")
            updated.append(doc_id)
        return updated

    def audit_prices(self, collection):
        """
        Find stored platform prices that drifted from their basePrice.

        Returns:
            Dict of document ID -> list of (variant id, platform, stored, expected)
        """
        report = {}
        for item in self.firebase.list_documents(collection):
            variants = list(item.get('variants') or [])
            # Some documents (combos) are priced at the top level
            if item.get('basePrice') is not None and not variants:
                variants = [{'id': item.get('id'), 'basePrice': item['basePrice'],
                             'platformPricing': item.get('platformPricing')}]
            drift = find_price_drift(variants)
            if drift:
                report[item['_docId']] = drift
        logger.info(f"Audited {collection}: {len(report)} document(s) with price drift")
        return report

    def reprice_collection(self, collection, dry_run=False):
        """
        Recompute platform pricing for drifted documents.

        Variants with an invalid basePrice are left untouched; fix those with
        set_base_price.

        Returns:
            List of document IDs that were (or, with dry_run, would be) updated
        """
        repriced = []
        for doc_id, drift in self.audit_prices(collection).items():
            invalid = {variant_id for variant_id, platform, _, _ in drift if platform == 'basePrice'}
            if invalid:
                logger.warning(f"Invalid basePrice in {collection}/{doc_id}: {', '.join(sorted(invalid))}")
            if all(platform == 'basePrice' for _, platform, _, _ in drift):
                continue

            repriced.append(doc_id)
            if dry_run:
                logger.info(f"[dry run] would reprice {collection}/{doc_id}")
                continue

            item = self.get_item(collection, doc_id)
            if item.get('variants'):
                self._save_variants(collection, doc_id, [
                    price_variant(v) if v.get('basePrice') is not None and v.get('id') not in invalid else v
                    for v in item['variants']
                ])
            else:
                priced = price_variant({'basePrice': item['basePrice']})
                self.firebase.update_document(
                    collection, doc_id, {'platformPricing': priced['platformPricing']}, touch=True
                )
                logger.info(f"Repriced {collection}/{doc_id}")
        return repriced

    def find_duplicates(self, collection, key='name', active_only=True):
        """
        Group documents sharing the same value of a field.

        Returns:
            Dict of key value -> list of document IDs (only groups of 2+)
        """
        where = [('active', '==', True)] if active_only else None
        groups = defaultdict(list)
        for item in self.firebase.list_documents(collection, where=where):
            value = item.get(key)
            if value is not None:
                groups[value].append(item['_docId'])
        return {value: ids for value, ids in groups.items() if len(ids) > 1}
