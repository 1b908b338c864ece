"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from datetime import date, datetime

from inventory.models.domain import ElectronicItem, GroceryItem, InventoryItem
from inventory.repositories.inventory_repository import InventoryRepository
from inventory.services.warehouse_service import WarehouseService


@pytest.fixture(autouse=True)
def isolated_dirs(monkeypatch, tmp_path):
    """Keep snapshot and log output inside the test's temp directory."""
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"
    data_dir.mkdir()

    monkeypatch.setattr("inventory.env_config.DATA_DIR", data_dir)
    monkeypatch.setattr("inventory.env_config.LOG_DIR", log_dir)
    monkeypatch.setattr("inventory.log_manager.LOG_DIR", log_dir)

    return {"data_dir": data_dir, "log_dir": log_dir}


@pytest.fixture
def electronics():
    """Three electronic items with distinct ids."""
    return [
        ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24),
        ElectronicItem(id=2, name="Smartphone", quantity=23, brand="Samsung", warranty_months=12),
        ElectronicItem(id=3, name="Headphones", quantity=50, brand="Sony", warranty_months=6),
    ]


@pytest.fixture
def groceries():
    return [
        GroceryItem(id=101, name="Milk", quantity=100, expiry_date=date(2024, 6, 7)),
        GroceryItem(id=102, name="Bread", quantity=75, expiry_date=date(2024, 6, 3)),
    ]


@pytest.fixture
def stock_items():
    return [
        InventoryItem(id=1, name="Keyboard", quantity=25, date_added=datetime(2024, 5, 30, 9, 15, 0, 123456)),
        InventoryItem(id=2, name="Monitor", quantity=15, date_added=datetime(2024, 5, 28, 17, 0)),
    ]


@pytest.fixture
def electronics_repo(electronics):
    """Electronics repository seeded with ids 1, 2, 3."""
    repo = InventoryRepository(ElectronicItem)
    for item in electronics:
        repo.add(item)
    return repo


@pytest.fixture
def warehouse(isolated_dirs):
    """Warehouse service with empty repositories writing to the temp data dir."""
    return WarehouseService.from_config(data_dir=isolated_dirs["data_dir"])
