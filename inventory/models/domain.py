"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Protocol, Type


class Entity(Protocol):
    """Anything stored in a repository: exposes a stable integer id."""

    @property
    def id(self) -> int:
        ...


class ItemKind(str, Enum):
    """Inventory kinds, one repository per kind."""
    ELECTRONICS = "electronics"
    GROCERIES = "groceries"
    STOCK = "stock"


@dataclass(frozen=True)
class InventoryItem:
    """General stock item."""
    id: int
    name: str
    quantity: int
    date_added: datetime


@dataclass(frozen=True)
class ElectronicItem:
    """Electronic item with brand and warranty."""
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int


@dataclass(frozen=True)
class GroceryItem:
    """Perishable grocery item."""
    id: int
    name: str
    quantity: int
    expiry_date: date


ENTITY_TYPES: Dict[ItemKind, Type] = {
    ItemKind.ELECTRONICS: ElectronicItem,
    ItemKind.GROCERIES: GroceryItem,
    ItemKind.STOCK: InventoryItem,
}
