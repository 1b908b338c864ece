"""Inventory repository - in-memory implementation with JSON snapshots."""

from dataclasses import fields, replace
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import ValidationError

from inventory.repositories.base import Repository, T
from inventory.repositories.errors import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
    SnapshotFormatError,
)
from inventory.repositories.snapshot import SnapshotCodec, SnapshotTarget
from inventory.repositories.validators import Validator, default_validators


class InventoryRepository(Repository[T]):
    """
    Repository for inventory items of a single entity type.

    Current implementation: In-memory (dict keyed by item id)
    Iteration order: insertion order; a loaded snapshot keeps file order.
    Persistence: explicit save_snapshot / load_snapshot only.

    Stored entities are frozen dataclasses. Field updates replace the stored
    entity with a copy, so lists returned earlier never change underneath
    their holders.
    """

    def __init__(
        self,
        entity_type: Type[T],
        validators: Optional[Dict[str, Validator]] = None,
    ):
        self.entity_type = entity_type
        self.validators: Dict[str, Validator] = (
            default_validators() if validators is None else dict(validators)
        )
        self._items: Dict[int, T] = {}
        self._codec: SnapshotCodec[T] = SnapshotCodec(entity_type)
        self._field_names = {f.name for f in fields(entity_type)}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: int) -> bool:
        return id in self._items

    @property
    def codec(self) -> SnapshotCodec[T]:
        return self._codec

    def add(self, item: T) -> T:
        """Add an item. Raises DuplicateKeyError or InvalidValueError."""
        if not isinstance(item, self.entity_type):
            raise TypeError(
                f"Expected {self.entity_type.__name__}, got {type(item).__name__}"
            )
        if item.id in self._items:
            raise DuplicateKeyError(item.id)
        self._validate_item(item)
        self._items[item.id] = item
        return item

    def get_by_id(self, id: int) -> T:
        """Get item by ID."""
        try:
            return self._items[id]
        except KeyError:
            raise NotFoundError(id) from None

    def remove(self, id: int) -> T:
        """Remove item by ID and return it."""
        if id not in self._items:
            raise NotFoundError(id)
        return self._items.pop(id)

    def list_all(self) -> List[T]:
        """List all items in insertion order."""
        return list(self._items.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first item matching predicate, or None."""
        return next((item for item in self._items.values() if predicate(item)), None)

    def find_all(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return all items matching predicate."""
        return [item for item in self._items.values() if predicate(item)]

    def update_quantity(self, id: int, new_quantity: int) -> T:
        """Set an item's quantity."""
        return self.update_field(id, "quantity", new_quantity)

    def update_field(self, id: int, field: str, value: Any) -> T:
        """
        Replace one mutable field of a stored item.

        The value is validated before the lookup, so an invalid value is
        reported even for a missing id. Identity and all other fields are
        preserved.

        Raises:
            InvalidValueError: Field is ``id`` or unknown, the value fails its
                validator, or its type does not match the entity schema.
            NotFoundError: No item with this id.
        """
        if field == "id" or field not in self._field_names:
            raise InvalidValueError(field, value, f"{self.entity_type.__name__} has no updatable field '{field}'.")
        self._validate(field, value)

        updated = replace(self.get_by_id(id), **{field: value})
        self._check_schema(updated)
        self._items[id] = updated
        return updated

    def save_snapshot(self, target: SnapshotTarget) -> int:
        """Write all items to a JSON snapshot. Returns the item count.

        Raises:
            SnapshotIOError: Target cannot be written.
        """
        items = self.list_all()
        self._codec.write(items, target)
        return len(items)

    def load_snapshot(self, source: SnapshotTarget) -> int:
        """Replace all items with the contents of a JSON snapshot.

        The whole document is parsed and validated before the current
        contents are touched; on any error the repository is unchanged.

        Returns:
            Number of items loaded

        Raises:
            SnapshotIOError: Source cannot be read.
            SnapshotFormatError: Malformed document, duplicate ids, or
                values rejected by a field validator.
        """
        staged: Dict[int, T] = {}
        for item in self._codec.read(source):
            if item.id in staged:
                raise SnapshotFormatError(f"Duplicate item ID {item.id} in snapshot")
            try:
                self._validate_item(item)
            except InvalidValueError as e:
                raise SnapshotFormatError(f"Item {item.id}: {e}") from e
            staged[item.id] = item

        self._items = staged
        return len(staged)

    def _validate(self, field: str, value: Any) -> None:
        validator = self.validators.get(field)
        if validator is None:
            return
        try:
            valid = validator(value)
        except (TypeError, ValueError):
            valid = False
        if not valid:
            raise InvalidValueError(field, value, (validator.__doc__ or "").strip())

    def _validate_item(self, item: T) -> None:
        for field in self.validators:
            if field in self._field_names:
                self._validate(field, getattr(item, field))
        self._check_schema(item)

    def _check_schema(self, item: T) -> None:
        """Reject field values of the wrong type, so every stored item stays loadable."""
        try:
            self._codec.check(item)
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "item"
            value = getattr(item, field, error.get("input"))
            raise InvalidValueError(field, value, f"{error['msg']}.") from e
