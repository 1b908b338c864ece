"""Warehouse inventory.

Typed in-memory repositories with validation and JSON snapshots, plus:
- Seeding from sample data in the configuration file
- Console reports and a command-line interface
- A REST API over the same warehouse service

Usage:
    python -m inventory.cli demo
    ./start_inventory.py  # From repo root
"""
