"""Data Transfer Objects - snapshot document and API contracts."""

from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional, List, Dict, Any

from inventory.models.domain import ItemKind

SNAPSHOT_VERSION = 1


class SnapshotDocument(BaseModel):
    """One saved snapshot: the full entity set of a repository."""
    version: int
    entity_type: str
    saved_at: datetime
    items: List[Dict[str, Any]]

    model_config = ConfigDict(extra="forbid")


class QuantityUpdateRequest(BaseModel):
    """Request to overwrite an item's quantity."""
    quantity: int


class RestockRequest(BaseModel):
    """Request to add units to an item's quantity."""
    amount: int


class OperationResult(BaseModel):
    """Outcome of a warehouse operation.

    Exactly one of ``item``/``count`` is meaningful on success; on failure
    ``error_code`` names the repository error kind.
    """
    ok: bool
    message: str
    error_code: Optional[str] = None
    item: Optional[Dict[str, Any]] = None
    count: Optional[int] = None


class ItemListResponse(BaseModel):
    """Response with all items of one kind."""
    kind: ItemKind
    items: List[Dict[str, Any]]
    total: int = Field(ge=0)


class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    error_code: Optional[str] = None
