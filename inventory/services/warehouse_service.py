"""Warehouse service - business logic over the per-kind inventory repositories."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from inventory.env_config import snapshot_path
from inventory.models.domain import ENTITY_TYPES, ItemKind
from inventory.models.dto import ItemListResponse, OperationResult
from inventory.repositories.errors import RepositoryError, SnapshotIOError
from inventory.repositories.inventory_repository import InventoryRepository
from inventory.services.config_service import ConfigService, get_config_service

KindLike = Union[ItemKind, str]


class WarehouseService:
    """
    Service for warehouse inventory operations.

    Responsibilities:
    - Seed repositories from configured sample data
    - Enforce stock rules (restock adds to the current quantity)
    - Persist each kind to its own snapshot file
    - Convert repository errors into explicit OperationResult failures

    Does NOT:
    - Format output (that's ReportService / CLI / API)
    - Store items itself (that's repository layer)
    """

    def __init__(
        self,
        repositories: Dict[ItemKind, InventoryRepository],
        data_dir: Optional[Path] = None,
        config_service: Optional[ConfigService] = None,
    ):
        self.repositories = repositories
        self.data_dir = data_dir
        self.config_service = config_service or get_config_service()

    @classmethod
    def from_config(
        cls,
        config_service: Optional[ConfigService] = None,
        data_dir: Optional[Path] = None,
    ) -> "WarehouseService":
        """Create empty repositories for every kind, validated per config."""
        config_service = config_service or get_config_service()
        validators = config_service.build_validators()
        repositories = {
            kind: InventoryRepository(entity_type, validators=validators)
            for kind, entity_type in ENTITY_TYPES.items()
        }
        return cls(repositories, data_dir=data_dir, config_service=config_service)

    def repository(self, kind: KindLike) -> InventoryRepository:
        """Get the repository for a kind. Raises ValueError for unknown kinds."""
        return self.repositories[ItemKind(kind)]

    def snapshot_path(self, kind: KindLike) -> Path:
        return snapshot_path(kind, self.data_dir)

    def seed(self, kind: KindLike, now: Optional[datetime] = None) -> List[OperationResult]:
        """Add the configured sample items for a kind.

        Items that fail (e.g. already present) are reported, not raised.
        """
        return [
            self.add_item(kind, payload)
            for payload in self.config_service.get_sample_data(ItemKind(kind).value, now=now)
        ]

    def list_items(self, kind: KindLike) -> ItemListResponse:
        repo = self.repository(kind)
        items = [repo.codec.to_dict(item) for item in repo.list_all()]
        return ItemListResponse(kind=ItemKind(kind), items=items, total=len(items))

    def get_item(self, kind: KindLike, item_id: int) -> OperationResult:
        repo = self.repository(kind)
        try:
            item = repo.get_by_id(item_id)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(ok=True, message=f"Found item with ID {item_id}.", item=repo.codec.to_dict(item))

    def add_item(self, kind: KindLike, payload: Dict[str, Any]) -> OperationResult:
        """Validate a payload into the kind's entity type and add it."""
        repo = self.repository(kind)
        try:
            item = repo.codec.from_dict(payload)
        except ValidationError as e:
            return OperationResult(
                ok=False,
                message=f"Invalid {repo.entity_type.__name__}: {e.error_count()} field error(s)",
                error_code="invalid_value",
            )

        try:
            repo.add(item)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(ok=True, message=f"Added item with ID {item.id}.", item=repo.codec.to_dict(item))

    def remove_item(self, kind: KindLike, item_id: int) -> OperationResult:
        repo = self.repository(kind)
        try:
            removed = repo.remove(item_id)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(
            ok=True,
            message=f"Successfully removed item with ID {item_id}.",
            item=repo.codec.to_dict(removed),
        )

    def set_quantity(self, kind: KindLike, item_id: int, quantity: int) -> OperationResult:
        repo = self.repository(kind)
        try:
            updated = repo.update_quantity(item_id, quantity)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(
            ok=True,
            message=f"Quantity for item ID {item_id} set to {quantity}.",
            item=repo.codec.to_dict(updated),
        )

    def increase_stock(self, kind: KindLike, item_id: int, amount: int) -> OperationResult:
        """Add ``amount`` units to an item's current quantity."""
        repo = self.repository(kind)
        try:
            current = repo.get_by_id(item_id)
            updated = repo.update_quantity(item_id, current.quantity + amount)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(
            ok=True,
            message=f"Successfully increased stock for item ID {item_id} by {amount} units.",
            item=repo.codec.to_dict(updated),
        )

    def snapshot_exists(self, kind: KindLike) -> bool:
        return self.snapshot_path(kind).exists()

    def save(self, kind: KindLike) -> OperationResult:
        """Write a kind's repository to its snapshot file."""
        path = self.snapshot_path(kind)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._failure(SnapshotIOError(f"Cannot create data directory {path.parent}: {e}"))
        try:
            count = self.repository(kind).save_snapshot(path)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(ok=True, message=f"Saved {count} item(s) to {path}.", count=count)

    def load(self, kind: KindLike) -> OperationResult:
        """Replace a kind's repository with its snapshot file contents."""
        path = self.snapshot_path(kind)
        try:
            count = self.repository(kind).load_snapshot(path)
        except RepositoryError as e:
            return self._failure(e)
        return OperationResult(ok=True, message=f"Loaded {count} item(s) from {path}.", count=count)

    @staticmethod
    def _failure(error: RepositoryError) -> OperationResult:
        """Convert a repository error to a failed result."""
        return OperationResult(ok=False, message=str(error), error_code=error.error_code)
