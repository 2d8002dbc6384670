#!/usr/bin/env python3
"""
Menu Seeding Script
Populates the menu collections (production or emulator) from menu_data.py.

Usage:
  python seed_menu.py --emulator
  python seed_menu.py --collections desserts coldSides --clear
"""
import argparse
import logging
import sys

from config import Config
from firebase_service import init_firestore
from menu_data import SEED_COLLECTIONS
from services.pricing import InvalidArgument
from services.seed_service import SeedService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed Philly Wings Express menu data into Firestore.")
    parser.add_argument(
        "--emulator",
        action="store_true",
        help=f"Write to the local emulator ({Config.FIRESTORE_EMULATOR_ADDRESS}) instead of production.",
    )
    parser.add_argument(
        "--collections",
        nargs="+",
        choices=sorted(SEED_COLLECTIONS),
        help="Collections to seed (default: all).",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing documents in each collection before seeding.",
    )
    return parser.parse_args(argv)


def main(argv=None, firebase_service=None) -> int:
    args = parse_args(argv)

    try:
        firebase = firebase_service or init_firestore(Config, emulator=args.emulator)
        counts = SeedService(firebase).seed(args.collections, clear_existing=args.clear)
    except InvalidArgument as e:
        logger.error(f"Invalid seed data: {str(e)}")
        return 1
    except Exception as e:
        logger.error(f"Error seeding menu: {str(e)}")
        return 1

    print("\n" + "=" * 50)
    print(f"Seeded {firebase.target}")
    print("=" * 50)
    for name, count in counts.items():
        print(f"  ✅ {name}: {count} documents")
    return 0


if __name__ == "__main__":
    sys.exit(main())
