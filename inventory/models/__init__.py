"""Domain entities and DTOs."""
