#!/usr/bin/env python3
"""Command-line interface for the warehouse inventory.

Each command loads the kind's snapshot (if one exists), applies the
operation and saves the snapshot back when the inventory changed.

Usage:
    python -m inventory.cli demo
    python -m inventory.cli seed --kind groceries
    python -m inventory.cli list --kind electronics
    python -m inventory.cli show 2 --kind electronics
    python -m inventory.cli restock 101 50 --kind groceries
    python -m inventory.cli set-quantity 2 5 --kind electronics
    python -m inventory.cli remove 3 --kind electronics
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from inventory import env_config
from inventory.env_config import INVENTORY_LOG_FILENAME
from inventory.log_manager import LogCapture
from inventory.models.domain import InventoryItem, ItemKind
from inventory.models.dto import OperationResult
from inventory.repositories.errors import RepositoryError
from inventory.repositories.inventory_logger import InventoryLogger
from inventory.services.config_service import get_config_service
from inventory.services.report_service import ReportService
from inventory.services.warehouse_service import WarehouseService


def _fail(result: OperationResult) -> int:
    print(f"Error [{result.error_code}]: {result.message}", file=sys.stderr)
    return 1


def _open_service(data_dir: Path) -> Optional[WarehouseService]:
    """Create the service and load every kind that has a snapshot."""
    service = WarehouseService.from_config(data_dir=data_dir)
    for kind in ItemKind:
        if service.snapshot_exists(kind):
            result = service.load(kind)
            if not result.ok:
                _fail(result)
                return None
    return service


def _save_and_report(service: WarehouseService, kind: str, result: OperationResult) -> int:
    if not result.ok:
        return _fail(result)
    print(result.message)
    saved = service.save(kind)
    if not saved.ok:
        return _fail(saved)
    return 0


def run_demo(data_dir: Path) -> int:
    """Walk through the warehouse operations on sample data, including failures."""
    config_service = get_config_service()
    service = WarehouseService.from_config(config_service=config_service, data_dir=data_dir)
    report = ReportService()

    for kind in (ItemKind.ELECTRONICS, ItemKind.GROCERIES):
        service.seed(kind)

    report.print_items(config_service.get_kind_name(ItemKind.GROCERIES), service.repository(ItemKind.GROCERIES).list_all())
    report.print_items(config_service.get_kind_name(ItemKind.ELECTRONICS), service.repository(ItemKind.ELECTRONICS).list_all())

    print("Testing error scenarios:")
    duplicate = service.add_item(ItemKind.ELECTRONICS, {
        "id": 1, "name": "Duplicate Laptop", "quantity": 5, "brand": "HP", "warranty_months": 12,
    })
    print(f"Expected error: {duplicate.message}")
    missing = service.remove_item(ItemKind.GROCERIES, 999)
    print(f"Expected error: {missing.message}")
    invalid = service.set_quantity(ItemKind.ELECTRONICS, 2, -5)
    print(f"Expected error: {invalid.message}")

    print("\nTesting successful operations:")
    print(service.increase_stock(ItemKind.GROCERIES, 101, 50).message)
    report.print_items(config_service.get_kind_name(ItemKind.GROCERIES), service.repository(ItemKind.GROCERIES).list_all())
    print(service.remove_item(ItemKind.ELECTRONICS, 3).message)
    report.print_items(config_service.get_kind_name(ItemKind.ELECTRONICS), service.repository(ItemKind.ELECTRONICS).list_all())

    print("Inventory log round trip:")
    log_path = Path(data_dir) / INVENTORY_LOG_FILENAME
    log_path.parent.mkdir(parents=True, exist_ok=True)
    codec = service.repository(ItemKind.STOCK).codec
    writer = InventoryLogger(InventoryItem, log_path)
    for payload in config_service.get_sample_data(ItemKind.STOCK.value):
        writer.add(codec.from_dict(payload))
    try:
        writer.save_to_file()
        reader = InventoryLogger(InventoryItem, log_path)
        reader.load_from_file()
    except RepositoryError as e:
        print(f"Error [{e.error_code}]: {e}", file=sys.stderr)
        return 1
    report.print_items(config_service.get_kind_name(ItemKind.STOCK), reader.get_all())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Warehouse inventory manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--data-dir", "-d",
        type=Path,
        default=env_config.DATA_DIR,
        help=f"Snapshot directory (default: {env_config.DATA_DIR})"
    )
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="Don't capture output to a log file"
    )

    kind_parent = argparse.ArgumentParser(add_help=False)
    kind_parent.add_argument(
        "--kind", "-k",
        choices=[kind.value for kind in ItemKind],
        default=ItemKind.ELECTRONICS.value,
        help="Item kind (default: electronics)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("demo", help="Run the sample warehouse walkthrough")
    subparsers.add_parser("seed", parents=[kind_parent], help="Add configured sample items")
    subparsers.add_parser("list", parents=[kind_parent], help="List all items")

    show = subparsers.add_parser("show", parents=[kind_parent], help="Show one item")
    show.add_argument("id", type=int)

    remove = subparsers.add_parser("remove", parents=[kind_parent], help="Remove an item")
    remove.add_argument("id", type=int)

    set_quantity = subparsers.add_parser("set-quantity", parents=[kind_parent], help="Overwrite an item's quantity")
    set_quantity.add_argument("id", type=int)
    set_quantity.add_argument("quantity", type=int)

    restock = subparsers.add_parser("restock", parents=[kind_parent], help="Add units to an item's quantity")
    restock.add_argument("id", type=int)
    restock.add_argument("amount", type=int)

    return parser


def run_command(args: argparse.Namespace) -> int:
    if args.command == "demo":
        return run_demo(args.data_dir)

    service = _open_service(args.data_dir)
    if service is None:
        return 1

    kind = args.kind
    report = ReportService()

    if args.command == "list":
        report.print_items(service.config_service.get_kind_name(kind), service.repository(kind).list_all())
        return 0

    if args.command == "show":
        result = service.get_item(kind, args.id)
        if not result.ok:
            return _fail(result)
        for line in report.format_item(service.repository(kind).get_by_id(args.id)):
            print(line)
        return 0

    if args.command == "seed":
        results = service.seed(kind)
        for result in results:
            print(result.message if result.ok else f"Skipped: {result.message}")
        saved = service.save(kind)
        if not saved.ok:
            return _fail(saved)
        print(saved.message)
        return 0

    if args.command == "remove":
        return _save_and_report(service, kind, service.remove_item(kind, args.id))

    if args.command == "set-quantity":
        return _save_and_report(service, kind, service.set_quantity(kind, args.id, args.quantity))

    if args.command == "restock":
        return _save_and_report(service, kind, service.increase_stock(kind, args.id, args.amount))

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.no_log:
        return run_command(args)

    with LogCapture():
        return run_command(args)


if __name__ == "__main__":
    sys.exit(main())
