"""Inventory log - insertion-ordered list of entities with file persistence."""

from pathlib import Path
from typing import Generic, List, Type, Union

from inventory.repositories.base import T
from inventory.repositories.snapshot import SnapshotCodec


class InventoryLogger(Generic[T]):
    """
    Append-only log of inventory entries backed by a JSON file.

    Unlike InventoryRepository this keeps every entry in arrival order and
    does not enforce unique ids.
    """

    def __init__(self, entity_type: Type[T], file_path: Union[str, Path]):
        self.file_path = Path(file_path)
        self._codec: SnapshotCodec[T] = SnapshotCodec(entity_type)
        self._log: List[T] = []

    def __len__(self) -> int:
        return len(self._log)

    def add(self, item: T) -> None:
        self._log.append(item)

    def get_all(self) -> List[T]:
        return list(self._log)

    def save_to_file(self) -> None:
        """Write the log to file_path. Raises SnapshotIOError."""
        self._codec.write(self._log, self.file_path)

    def load_from_file(self) -> bool:
        """Replace the log with the file contents.

        Returns:
            False if the file does not exist (log untouched), True once loaded

        Raises:
            SnapshotIOError: File exists but cannot be read.
            SnapshotFormatError: File content is not a valid snapshot.
        """
        if not self.file_path.exists():
            return False

        self._log = self._codec.read(self.file_path)
        return True
