"""Report service for console listings of inventory contents."""

import sys
from typing import Iterable, List, TextIO

from inventory.models.domain import ElectronicItem, GroceryItem, InventoryItem


class ReportService:
    """Format repository contents for display. Never mutates a repository."""

    def format_item(self, item) -> List[str]:
        """Format one item as one or more display lines."""
        lines = [f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}"]

        if isinstance(item, ElectronicItem):
            lines.append(f"    Brand: {item.brand}, Warranty: {item.warranty_months} months")
        elif isinstance(item, GroceryItem):
            lines.append(f"    Expiry Date: {item.expiry_date:%Y-%m-%d}")
        elif isinstance(item, InventoryItem):
            lines[0] += f", Added: {item.date_added:%Y-%m-%d}"

        return lines

    def format_items(self, title: str, items: Iterable) -> List[str]:
        """Format a titled listing of items."""
        lines = [f"Inventory of {title}:"]
        count = 0
        for item in items:
            lines.extend(self.format_item(item))
            count += 1
        if count == 0:
            lines.append("    (no items)")
        return lines

    def print_items(self, title: str, items: Iterable, stream: TextIO = None) -> None:
        """Print a titled listing followed by a blank line."""
        stream = stream or sys.stdout
        for line in self.format_items(title, items):
            print(line, file=stream)
        print(file=stream)
