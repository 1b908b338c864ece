"""
Configuration service for inventory settings.

Provides a single source of truth for item kinds, field validation
rules and sample data used for seeding.
"""

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Any, Optional

from inventory.models.domain import ItemKind
from inventory.repositories.validators import Validator, range_validator


class ConfigService:
    """Service for loading and providing inventory configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the configuration service.

        Args:
            config_path: Path to configuration JSON file.
                        Defaults to inventory/config/inventory_config.json
        """
        if config_path is None:
            package_dir = Path(__file__).parent.parent
            config_path = package_dir / "config" / "inventory_config.json"

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_kinds(self) -> Dict[str, Dict[str, Any]]:
        """Get all item kind configurations, keyed by kind id."""
        return self.config.get("kinds", {})

    def get_kind_name(self, kind: str) -> str:
        """Get display name for a kind, falling back to the kind id."""
        kind_config = self.get_kinds().get(ItemKind(kind).value)
        if kind_config:
            return kind_config.get("name", ItemKind(kind).value)
        return ItemKind(kind).value

    def get_validation_rules(self) -> Dict[str, Dict[str, Any]]:
        """Get per-field validation rules (``{"quantity": {"min": 0}}``)."""
        return self.config.get("validation", {})

    def build_validators(self) -> Dict[str, Validator]:
        """Turn the validation rules into repository field predicates.

        Returns:
            Dictionary mapping field names to predicates
        """
        validators = {}
        for field, rule in self.get_validation_rules().items():
            validators[field] = range_validator(rule.get("min"), rule.get("max"))
        return validators

    def get_sample_data(self, kind: str, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """Get sample item payloads for a kind, with relative dates resolved.

        ``expiresInDays`` becomes ``expiry_date`` and ``addedDaysAgo``
        becomes ``date_added``, both relative to ``now``.

        Args:
            kind: Item kind id
            now: Reference time (default: datetime.now())

        Returns:
            List of payload dicts ready for entity validation
        """
        now = now or datetime.now()
        raw_items = self.config.get("sampleData", {}).get(ItemKind(kind).value, [])

        payloads = []
        for raw in raw_items:
            payload = dict(raw)
            if "expiresInDays" in payload:
                days = payload.pop("expiresInDays")
                payload["expiry_date"] = (now + timedelta(days=days)).date()
            if "addedDaysAgo" in payload:
                days = payload.pop("addedDaysAgo")
                payload["date_added"] = now - timedelta(days=days)
            payloads.append(payload)
        return payloads


# Global instance for easy import
_config_service = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance."""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service
