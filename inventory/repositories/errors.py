"""Repository error taxonomy.

Every error carries an ``error_code`` so outer layers (service results,
API responses, CLI exit messages) can report the failure kind without
matching on exception classes.
"""


class RepositoryError(Exception):
    """Base class for all repository failures."""

    error_code = "repository_error"


class DuplicateKeyError(RepositoryError):
    """An entity with the same id is already stored."""

    error_code = "duplicate_key"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} already exists in the inventory.")


class NotFoundError(RepositoryError):
    """No entity is stored under the requested id."""

    error_code = "not_found"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Item with ID {entity_id} not found in the inventory.")


class InvalidValueError(RepositoryError):
    """A field value was rejected by its validation predicate."""

    error_code = "invalid_value"

    def __init__(self, field: str, value, reason: str = ""):
        self.field = field
        self.value = value
        message = f"{field.capitalize()} {value!r} is invalid."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class SnapshotIOError(RepositoryError):
    """The snapshot sink or source could not be accessed."""

    error_code = "io_failure"


class SnapshotFormatError(RepositoryError):
    """The snapshot content is malformed or does not match the entity type."""

    error_code = "format_error"
