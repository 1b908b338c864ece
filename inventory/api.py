"""REST API endpoints for the warehouse inventory."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from inventory.models.domain import ItemKind
from inventory.models.dto import (
    ItemListResponse,
    OperationResult,
    QuantityUpdateRequest,
    RestockRequest,
)
from inventory.services.config_service import get_config_service
from inventory.services.warehouse_service import WarehouseService

router = APIRouter()

_warehouse_service = None

# Repository error code -> HTTP status
ERROR_STATUS = {
    "duplicate_key": 409,
    "not_found": 404,
    "invalid_value": 422,
    "io_failure": 500,
    "format_error": 400,
}


def get_warehouse_service() -> WarehouseService:
    """Get warehouse service instance."""
    global _warehouse_service
    if _warehouse_service is None:
        _warehouse_service = WarehouseService.from_config()
    return _warehouse_service


def _unwrap(result: OperationResult) -> Dict[str, Any]:
    """Return the result body, or raise the HTTP error matching its error code."""
    if not result.ok:
        raise HTTPException(
            status_code=ERROR_STATUS.get(result.error_code, 500),
            detail=result.message,
        )
    return result.model_dump()


@router.get("/kinds")
async def list_kinds(service: WarehouseService = Depends(get_warehouse_service)):
    """List item kinds with display names and item counts."""
    config_service = get_config_service()
    return {
        "kinds": [
            {
                "id": kind.value,
                "name": config_service.get_kind_name(kind),
                "total": len(service.repository(kind)),
            }
            for kind in ItemKind
        ]
    }


@router.get("/{kind}/items", response_model=ItemListResponse)
async def list_items(
    kind: ItemKind,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """List all items of a kind."""
    return service.list_items(kind)


@router.get("/{kind}/items/{item_id}")
async def get_item(
    kind: ItemKind,
    item_id: int,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Get one item."""
    return _unwrap(service.get_item(kind, item_id))


@router.post("/{kind}/items", status_code=201)
async def add_item(
    kind: ItemKind,
    payload: Dict[str, Any] = Body(...),
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Add an item. The body holds the kind's entity fields."""
    return _unwrap(service.add_item(kind, payload))


@router.delete("/{kind}/items/{item_id}")
async def remove_item(
    kind: ItemKind,
    item_id: int,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Remove an item."""
    return _unwrap(service.remove_item(kind, item_id))


@router.patch("/{kind}/items/{item_id}/quantity")
async def set_quantity(
    kind: ItemKind,
    item_id: int,
    request: QuantityUpdateRequest,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Overwrite an item's quantity."""
    return _unwrap(service.set_quantity(kind, item_id, request.quantity))


@router.post("/{kind}/restock/{item_id}")
async def restock(
    kind: ItemKind,
    item_id: int,
    request: RestockRequest,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Add units to an item's quantity."""
    return _unwrap(service.increase_stock(kind, item_id, request.amount))


@router.post("/{kind}/seed")
async def seed(
    kind: ItemKind,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Add the configured sample items for a kind."""
    results = service.seed(kind)
    return {
        "added": sum(1 for r in results if r.ok),
        "skipped": [r.message for r in results if not r.ok],
    }


@router.post("/{kind}/snapshot/save")
async def save_snapshot(
    kind: ItemKind,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Write a kind's items to its snapshot file."""
    return _unwrap(service.save(kind))


@router.post("/{kind}/snapshot/load")
async def load_snapshot(
    kind: ItemKind,
    service: WarehouseService = Depends(get_warehouse_service),
):
    """Replace a kind's items with its snapshot file contents."""
    if not service.snapshot_exists(kind):
        raise HTTPException(status_code=404, detail=f"No snapshot for {kind.value}")
    return _unwrap(service.load(kind))
