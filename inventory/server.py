"""FastAPI server for the warehouse inventory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import router as api_router, get_warehouse_service
from .models.domain import ItemKind


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load existing snapshots on startup."""
    service = get_warehouse_service()
    for kind in ItemKind:
        if service.snapshot_exists(kind):
            result = service.load(kind)
            if not result.ok:
                print(f"Warning: could not load {kind.value} snapshot: {result.message}")

    yield


app = FastAPI(
    title="Warehouse Inventory API",
    description="REST API for typed inventory repositories with JSON snapshots",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
