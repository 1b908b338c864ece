"""Field validation predicates for repository updates."""

from typing import Any, Callable, Dict, Optional

Validator = Callable[[Any], bool]


def non_negative(value: Any) -> bool:
    """Quantity cannot be negative."""
    return value >= 0


def range_validator(minimum: Optional[float] = None, maximum: Optional[float] = None) -> Validator:
    """Build a predicate accepting values within [minimum, maximum].

    Either bound may be None to leave that side open.
    """
    def validate(value: Any) -> bool:
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    if minimum is not None and maximum is not None:
        validate.__doc__ = f"Value must be between {minimum} and {maximum}."
    elif minimum is not None:
        validate.__doc__ = f"Value cannot be less than {minimum}."
    elif maximum is not None:
        validate.__doc__ = f"Value cannot be greater than {maximum}."
    return validate


def default_validators() -> Dict[str, Validator]:
    return {"quantity": non_negative}
