#!/usr/bin/env python3
"""
Inspect Menu Data in Firestore
Lists documents of a collection, or checks it for duplicates.

Usage:
  python inspect_collection.py freshSalads
  python inspect_collection.py menuItems --where category == fries --raw
  python inspect_collection.py cateringAddOns --duplicates
"""
import argparse
import json
import logging
import sys

from config import Config
from firebase_service import init_firestore
from services.menu_service import MenuService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect a Firestore collection.")
    parser.add_argument("collection", nargs="?", help="Collection name (omit to list collections).")
    parser.add_argument("--emulator", action="store_true", help="Read from the local emulator.")
    parser.add_argument("--where", nargs=3, metavar=("FIELD", "OP", "VALUE"), help="Filter documents.")
    parser.add_argument("--raw", action="store_true", help="Print full JSON of each document.")
    parser.add_argument("--duplicates", action="store_true", help="Group active documents sharing a key.")
    parser.add_argument("--key", default="name", help="Field compared by --duplicates (default: name).")
    return parser.parse_args(argv)


def _filter_value(value):
    """Interpret true/false/numbers on the command line"""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def print_document(doc, raw=False):
    """Pretty print a menu document"""
    print(f"\n📄 {doc.pop('_docId')}: {doc.get('name', 'N/A')}")
    if raw:
        print(json.dumps(doc, indent=2, default=str))
        return
    if doc.get('category'):
        print(f"   category: {doc['category']}")
    if doc.get('basePrice') is not None:
        print(f"   basePrice: ${doc['basePrice']}")
    for variant in doc.get('variants') or []:
        print(f"   - {variant.get('id')}: {variant.get('name', '')} ${variant.get('basePrice', 'N/A')} "
              f"{variant.get('platformPricing', {})}")


def main(argv=None, firebase_service=None) -> int:
    args = parse_args(argv)
    try:
        firebase = firebase_service or init_firestore(Config, emulator=args.emulator)

        if not args.collection:
            collections = firebase.list_collections()
            print(f"\n📂 Found {len(collections)} collections in {firebase.target}:")
            for name in collections:
                print(f"   - {name}")
            return 0

        if args.duplicates:
            duplicates = MenuService(firebase).find_duplicates(args.collection, key=args.key)
            if not duplicates:
                print(f"✅ No duplicate {args.key} values in {args.collection}")
                return 0
            print(f"⚠️  Duplicate {args.key} values in {args.collection}:")
            for value, ids in duplicates.items():
                print(f"   {value}: {', '.join(ids)}")
            return 1

        where = None
        if args.where:
            field, op, value = args.where
            where = [(field, op, _filter_value(value))]
        documents = firebase.list_documents(args.collection, where=where)

        print(f"\nFound {len(documents)} documents in {args.collection}:")
        for doc in documents:
            print_document(doc, raw=args.raw)
        return 0

    except Exception as e:
        logger.error(f"Error inspecting data: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
