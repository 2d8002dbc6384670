#!/usr/bin/env python3
"""
Sync production Firestore data into the local emulator.

Usage:
  python sync_production_to_emulator.py
  python sync_production_to_emulator.py --collections desserts menuItems
"""
import argparse
import logging
import sys

from google.api_core.exceptions import PermissionDenied

from config import Config
from firebase_service import init_firestore
from services.sync_service import SyncService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Copy production collections into the Firestore emulator.")
    parser.add_argument("--collections", nargs="+", help="Collections to sync (default: all).")
    return parser.parse_args(argv)


def main(argv=None, source=None, target=None) -> int:
    args = parse_args(argv)
    try:
        # Production must be created before the emulator host is set in the environment
        source = source or init_firestore(Config, app_name='production')
        target = target or init_firestore(Config, emulator=True)
        result = SyncService(source, target).sync(args.collections)
    except PermissionDenied as e:
        logger.error(f"Permission denied reading production data: {str(e)}")
        logger.error("Check FIREBASE_CREDENTIALS_PATH points to a service account for the project")
        return 1
    except Exception as e:
        logger.error(f"Error syncing production data: {str(e)}")
        return 1

    print("\n" + "=" * 50)
    for name, count in result['copied'].items():
        status = f"✅ {count} documents" if count else "⏭️  empty, skipped"
        print(f"  {name}: {status}")
    for name, error in result['failed'].items():
        print(f"  ❌ {name}: {error}")
    print("=" * 50)
    return 1 if result['failed'] else 0


if __name__ == "__main__":
    sys.exit(main())
