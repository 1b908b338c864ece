"""JSON snapshot codec for repository contents.

A snapshot is a single JSON document holding every entity of one type::

    {
      "version": 1,
      "entity_type": "ElectronicItem",
      "saved_at": "2024-05-01T10:00:00",
      "items": [{"id": 1, "name": "Laptop", ...}]
    }

Entities are (de)serialized through a pydantic ``TypeAdapter`` so field
names are preserved and dates round-trip as ISO strings.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Generic, IO, List, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from inventory.models.dto import SNAPSHOT_VERSION, SnapshotDocument
from inventory.repositories.errors import SnapshotFormatError, SnapshotIOError

T = TypeVar('T')

SnapshotTarget = Union[str, Path, IO[str]]


class SnapshotCodec(Generic[T]):
    """Serialize and parse snapshot documents for one entity type."""

    def __init__(self, entity_type: Type[T]):
        self.entity_type = entity_type
        self._item_adapter = TypeAdapter(entity_type)
        self._list_adapter = TypeAdapter(List[entity_type])

    def to_dict(self, item: T) -> Dict[str, Any]:
        """JSON-ready dict of a single entity."""
        return self._item_adapter.dump_python(item, mode="json")

    def from_dict(self, data: Dict[str, Any]) -> T:
        """Build an entity from a dict. Raises pydantic ValidationError."""
        return self._item_adapter.validate_python(data)

    def check(self, item: T) -> T:
        """Strictly re-validate an entity through its JSON form.

        Raises pydantic ValidationError when a field holds a value that a
        snapshot of this entity could not load back (e.g. 2.5 for an int).
        """
        text = self._item_adapter.dump_json(item, warnings=False)
        return self._item_adapter.validate_json(text, strict=True)

    def dumps(self, items: List[T]) -> str:
        document = SnapshotDocument(
            version=SNAPSHOT_VERSION,
            entity_type=self.entity_type.__name__,
            saved_at=datetime.now(),
            items=self._list_adapter.dump_python(items, mode="json"),
        )
        return document.model_dump_json(indent=2)

    def loads(self, text: Union[str, bytes]) -> List[T]:
        """Parse and validate a snapshot document.

        Raises:
            SnapshotFormatError: On invalid JSON, unexpected document shape,
                version or entity type mismatch, or invalid entity fields.
        """
        try:
            document = SnapshotDocument.model_validate_json(text)
        except ValidationError as e:
            raise SnapshotFormatError(f"Malformed snapshot: {e}") from e

        if document.version != SNAPSHOT_VERSION:
            raise SnapshotFormatError(
                f"Unsupported snapshot version {document.version} "
                f"(expected {SNAPSHOT_VERSION})"
            )
        if document.entity_type != self.entity_type.__name__:
            raise SnapshotFormatError(
                f"Snapshot holds {document.entity_type}, "
                f"expected {self.entity_type.__name__}"
            )

        try:
            return self._list_adapter.validate_python(document.items)
        except ValidationError as e:
            raise SnapshotFormatError(f"Invalid snapshot items: {e}") from e

    def write(self, items: List[T], target: SnapshotTarget) -> None:
        """Write a snapshot to a path or an open text stream."""
        text = self.dumps(items)
        try:
            if hasattr(target, "write"):
                target.write(text)
                return
            with open(target, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise SnapshotIOError(f"Error saving snapshot to {_describe(target)}: {e}") from e

    def read(self, source: SnapshotTarget) -> List[T]:
        """Read and validate a snapshot from a path or an open text stream."""
        try:
            if hasattr(source, "read"):
                text = source.read()
            else:
                with open(source, "r", encoding="utf-8") as f:
                    text = f.read()
        except UnicodeDecodeError as e:
            raise SnapshotFormatError(f"Snapshot {_describe(source)} is not UTF-8 text") from e
        except OSError as e:
            raise SnapshotIOError(f"Error reading snapshot {_describe(source)}: {e}") from e

        return self.loads(text)


def _describe(target: SnapshotTarget) -> str:
    if hasattr(target, "write") or hasattr(target, "read"):
        return getattr(target, "name", "<stream>")
    return str(target)
