"""Centralized filesystem configuration for the inventory application.

This module provides:
- Data directory for repository snapshots
- Log directory for captured console output
- Snapshot file naming per item kind

Both directories can be overridden with environment variables:
    INVENTORY_DATA_DIR, INVENTORY_LOG_DIR
"""

import os
from pathlib import Path
from typing import Optional, Union

from inventory.models.domain import ItemKind


# =============================================================================
# DIRECTORIES
# =============================================================================

# Repo root directory
_REPO_ROOT = Path(__file__).resolve().parent.parent

# Where per-kind snapshot files live
DATA_DIR = Path(os.environ.get(
    "INVENTORY_DATA_DIR",
    str(_REPO_ROOT / ".inventory_data")
))

# Where LogCapture writes rotated log files
LOG_DIR = Path(os.environ.get(
    "INVENTORY_LOG_DIR",
    str(_REPO_ROOT / "logs")
))

# Snapshot filename pattern, one file per kind
SNAPSHOT_FILENAME = "{kind}.json"

# Log file used by the inventory log demo
INVENTORY_LOG_FILENAME = "inventory_log.json"


def snapshot_path(kind: Union[ItemKind, str], data_dir: Optional[Path] = None) -> Path:
    """Get the snapshot file path for an item kind.

    Args:
        kind: Item kind (e.g. 'electronics')
        data_dir: Directory override (default: DATA_DIR)

    Returns:
        Path to the kind's snapshot file
    """
    kind_value = ItemKind(kind).value
    return Path(data_dir or DATA_DIR) / SNAPSHOT_FILENAME.format(kind=kind_value)
