"""
Seed Service - populate menu collections from the static catalogue
"""
import logging

from firebase_admin import firestore

from menu_data import SEED_COLLECTIONS
from models import MenuItem
from services.pricing import InvalidArgument, price_variant

logger = logging.getLogger(__name__)


def build_document(item):
    """Validated Firestore document with platform pricing on every variant"""
    priced = {**item, 'variants': [price_variant(v) for v in item.get('variants', [])]}
    return MenuItem(**priced).to_firestore()


class SeedService:
    """Service for seeding menu data"""

    def __init__(self, firebase_service, catalogue=None):
        self.firebase = firebase_service
        self.catalogue = catalogue if catalogue is not None else SEED_COLLECTIONS

    def seed(self, collections=None, clear_existing=False):
        """
        Seed collections from the catalogue.

        Args:
            collections: Collection names to seed (all when None)
            clear_existing: Delete existing documents first (use with caution!)

        Returns:
            Dict of collection -> number of documents written
        """
        names = list(collections) if collections else list(self.catalogue)
        unknown = [name for name in names if name not in self.catalogue]
        if unknown:
            raise InvalidArgument(f"No seed data for: {', '.join(unknown)}")

        counts = {}
        for name in names:
            if clear_existing:
                logger.warning(f"Clearing existing {name} ({self.firebase.target})...")
                self.firebase.clear_collection(name)

            documents = {}
            for doc_id, item in self.catalogue[name].items():
                document = build_document(item)
                document['updatedAt'] = firestore.SERVER_TIMESTAMP
                documents[doc_id] = document

            logger.info(f"Seeding {len(documents)} documents into {name}...")
            counts[name] = self.firebase.batch_write(name, documents)

        logger.info(f"Menu seeding completed: {counts}")
        return counts
