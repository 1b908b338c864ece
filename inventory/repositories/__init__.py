"""Data access layer: generic repository, inventory log and snapshot codec."""

from .base import Repository
from .errors import (
    RepositoryError,
    DuplicateKeyError,
    NotFoundError,
    InvalidValueError,
    SnapshotIOError,
    SnapshotFormatError,
)
from .inventory_repository import InventoryRepository
from .inventory_logger import InventoryLogger
from .snapshot import SnapshotCodec

__all__ = [
    'Repository',
    'RepositoryError',
    'DuplicateKeyError',
    'NotFoundError',
    'InvalidValueError',
    'SnapshotIOError',
    'SnapshotFormatError',
    'InventoryRepository',
    'InventoryLogger',
    'SnapshotCodec',
]
