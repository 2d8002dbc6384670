"""
Platform Menu Service - complete menu with delivery platform pricing
"""
import logging
from datetime import datetime, timezone

from firebase_admin import firestore

from services.pricing import get_platform_markup, process_platform_menu

logger = logging.getLogger(__name__)


class PlatformMenuService:
    """Builds and publishes platform-specific menus"""

    def __init__(self, firebase_service):
        self.firebase = firebase_service

    def _section(self, collection, category=None):
        where = [('category', '==', category)] if category else None
        documents = self.firebase.list_documents(collection, where=where)
        for doc in documents:
            doc.pop('_docId', None)
        return documents

    def fetch_complete_menu(self):
        """Fetch every section of the menu from Firestore"""
        logger.info("Fetching menu data from Firestore...")
        settings = self.firebase.get_document('settings', 'general') or {}
        return {
            'combos': self._section('combos'),
            'wings': self._section('menuItems', 'wings'),
            'sides': {
                'fries': self._section('menuItems', 'fries'),
                'mozzarella': self._section('menuItems', 'mozzarella-sticks'),
            },
            'beverages': self._section('beverages'),
            'sauces': self._section('sauces'),
            'settings': settings,
        }

    def get_platform_menu(self, platform):
        """Complete menu priced for one platform"""
        return process_platform_menu(self.fetch_complete_menu(), platform)

    def publish(self, platform, snapshot=None):
        """
        Record a published menu snapshot in publishedMenus.

        Args:
            platform: Platform name
            snapshot: Processed menu; built from Firestore when None

        Returns:
            Publication metadata including the new document ID
        """
        get_platform_markup(platform)
        if snapshot is None:
            snapshot = self.get_platform_menu(platform)

        now = datetime.now(timezone.utc)
        timestamp = now.isoformat()
        doc_id = f"{platform}_{int(now.timestamp() * 1000)}"
        metadata = {
            'platform': platform,
            'timestamp': timestamp,
            'filename': f"{timestamp}.json",
            'itemCount': {
                'combos': len(snapshot.get('combos') or []),
                'wings': len(snapshot.get('wings') or []),
                'beverages': len(snapshot.get('beverages') or []),
                'sauces': len(snapshot.get('sauces') or []),
            },
        }

        self.firebase.write_document('publishedMenus', doc_id, {
            **metadata,
            'publishedAt': firestore.SERVER_TIMESTAMP,
        }, merge=False)
        logger.info(f"Published {platform} menu as publishedMenus/{doc_id}")
        return {**metadata, 'id': doc_id}
