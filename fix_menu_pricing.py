#!/usr/bin/env python3
"""
Menu Fix-up Script
Patches menu documents: prices, variants, per-variant fields and images.

Usage:
  python fix_menu_pricing.py set-price desserts red_velvet_cake 4.75
  python fix_menu_pricing.py add-variant menuItems fries '{"id": "fries_large", "name": "Large Fries", "basePrice": 3.75}'
  python fix_menu_pricing.py add-variant menuItems fries '{...}' --first
  python fix_menu_pricing.py patch-variants plantBasedWings cauliflower '{"cauliflower_6": {"prepMethod": "fried"}}'
  python fix_menu_pricing.py set-images desserts '{"ny_cheesecake": "https://..."}'
  python fix_menu_pricing.py audit desserts
  python fix_menu_pricing.py reprice desserts --dry-run
"""
import argparse
import json
import logging
import sys

from config import Config
from firebase_service import init_firestore
from services.menu_service import MENU_COLLECTIONS, DocumentNotFound, MenuService
from services.pricing import InvalidArgument

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _json_arg(value):
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Patch Philly Wings Express menu documents.")
    parser.add_argument("--emulator", action="store_true", help="Use the local emulator.")
    sub = parser.add_subparsers(dest="command", required=True)

    set_price = sub.add_parser("set-price", help="Set a base price and recompute platform pricing.")
    set_price.add_argument("collection", choices=MENU_COLLECTIONS)
    set_price.add_argument("doc_id")
    set_price.add_argument("base_price")
    set_price.add_argument("--variant", action="append", dest="variant_ids", help="Only this variant (repeatable).")

    add_variant = sub.add_parser("add-variant", help="Add a variant (JSON) to a document.")
    add_variant.add_argument("collection", choices=MENU_COLLECTIONS)
    add_variant.add_argument("doc_id")
    add_variant.add_argument("variant", type=_json_arg)
    add_variant.add_argument("--first", action="store_true", help="Insert before existing variants.")

    replace = sub.add_parser("replace-variants", help="Replace the variant list (JSON array).")
    replace.add_argument("collection", choices=MENU_COLLECTIONS)
    replace.add_argument("doc_id")
    replace.add_argument("variants", type=_json_arg)

    patch = sub.add_parser("patch-variants", help="Merge fields into variants (JSON object keyed by variant id).")
    patch.add_argument("collection", choices=MENU_COLLECTIONS)
    patch.add_argument("doc_id")
    patch.add_argument("updates", type=_json_arg)

    images = sub.add_parser("set-images", help="Set imageUrl per document (JSON object doc id -> URL).")
    images.add_argument("collection", choices=MENU_COLLECTIONS)
    images.add_argument("urls", type=_json_arg)

    audit = sub.add_parser("audit", help="Report variants whose platform prices drifted.")
    audit.add_argument("collection", choices=MENU_COLLECTIONS)

    reprice = sub.add_parser("reprice", help="Recompute platform pricing for drifted documents.")
    reprice.add_argument("collection", choices=MENU_COLLECTIONS)
    reprice.add_argument("--dry-run", action="store_true")

    return parser.parse_args(argv)


def print_drift(report):
    if not report:
        print("✅ All platform prices match their base prices")
        return
    for doc_id, drift in report.items():
        print(f"\n❌ {doc_id}")
        for variant_id, platform, stored, expected in drift:
            if expected is None:
                print(f"   {variant_id}: invalid basePrice {stored!r}")
            else:
                print(f"   {variant_id} {platform}: stored {stored}, expected {expected:.2f}")


def run(args, service):
    if args.command == "set-price":
        variants = service.set_base_price(args.collection, args.doc_id, args.base_price, args.variant_ids)
        for v in variants:
            print(f"  {v['id']}: ${v['basePrice']:.2f} -> {v.get('platformPricing')}")
    elif args.command == "add-variant":
        variants = service.add_variant(args.collection, args.doc_id, args.variant,
                                       position="start" if args.first else "end")
        print(f"✅ Total variants now: {len(variants)}")
    elif args.command == "replace-variants":
        if not isinstance(args.variants, list):
            raise InvalidArgument("variants must be a JSON array")
        variants = service.replace_variants(args.collection, args.doc_id, args.variants)
        print(f"✅ Replaced with {len(variants)} variant(s)")
    elif args.command == "patch-variants":
        _, missing = service.patch_variants(args.collection, args.doc_id, args.updates)
        print(f"✅ Patched {len(args.updates) - len(missing)} variant(s)")
        for variant_id in missing:
            print(f"  ⚠️  not found: {variant_id}")
    elif args.command == "set-images":
        updated = service.set_image_urls(args.collection, args.urls)
        print(f"✅ Updated {len(updated)} image(s)")
    elif args.command == "audit":
        report = service.audit_prices(args.collection)
        print_drift(report)
        return 1 if report else 0
    elif args.command == "reprice":
        doc_ids = service.reprice_collection(args.collection, dry_run=args.dry_run)
        verb = "Would reprice" if args.dry_run else "Repriced"
        print(f"✅ {verb} {len(doc_ids)} document(s): {', '.join(doc_ids) or '-'}")
    return 0


def main(argv=None, firebase_service=None) -> int:
    args = parse_args(argv)
    try:
        firebase = firebase_service or init_firestore(Config, emulator=args.emulator)
        return run(args, MenuService(firebase))
    except (InvalidArgument, DocumentNotFound) as e:
        logger.error(str(e))
        return 2
    except Exception as e:
        logger.error(f"Error running {args.command}: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
