"""
Service layer for business logic.

This layer separates warehouse rules (seeding, restocking, reporting)
from the repositories and from the CLI/HTTP surfaces that call it.
"""
