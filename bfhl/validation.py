"""Shape and type guards for /bfhl request bodies."""

from typing import Any

from .exceptions import BadRequestError, UnprocessableEntityError


ALLOWED_KEYS = ("fibonacci", "prime", "lcm", "hcf", "AI")

# Largest integer a JSON number holds exactly in an IEEE 754 double
MAX_SAFE_INTEGER = 2**53 - 1


def _as_integer(value: Any) -> int | None:
    """Return value as an int when it is a whole JSON number, else None.

    JSON has a single number type, so ``7.0`` counts as an integer.
    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_integer(value: Any, label: str) -> int:
    """Validate that a value is a whole number.

    Args:
        value: Candidate value from the request body.
        label: Field name used in the error message.

    Returns:
        The value as an int.

    Raises:
        BadRequestError: If the value is not a whole number.
    """
    number = _as_integer(value)
    if number is None:
        raise BadRequestError(f"{label} must be an integer")
    return number


def validate_integer_array(value: Any, label: str, max_length: int) -> list[int]:
    """Validate a non-empty, bounded array of whole numbers.

    Args:
        value: Candidate value from the request body.
        label: Field name used in error messages.
        max_length: Maximum number of elements.

    Returns:
        The elements as ints, in input order.

    Raises:
        BadRequestError: If the value is not a non-empty integer array.
        UnprocessableEntityError: If the array is longer than max_length or an
            element is outside +/- MAX_SAFE_INTEGER.
    """
    if not isinstance(value, list):
        raise BadRequestError(f"{label} must be an array of integers")
    if not value:
        raise BadRequestError(f"{label} must not be empty")
    if len(value) > max_length:
        raise UnprocessableEntityError(f"{label} is too large")

    numbers: list[int] = []
    for item in value:
        number = _as_integer(item)
        if number is None:
            raise BadRequestError(f"{label} must contain only integers")
        if abs(number) > MAX_SAFE_INTEGER:
            raise UnprocessableEntityError(f"{label} values are too large")
        numbers.append(number)
    return numbers


def validate_single_key_object(body: Any) -> tuple[str, Any]:
    """Validate that the body is an object with exactly one allowed key.

    Args:
        body: Decoded JSON body.

    Returns:
        The (key, value) pair.

    Raises:
        BadRequestError: If the body is not an object, has zero or several
            keys, or uses a key outside ALLOWED_KEYS.
    """
    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")
    if len(body) != 1:
        raise BadRequestError(
            "Request body must contain exactly one key: fibonacci, prime, lcm, hcf, or AI"
        )

    key, value = next(iter(body.items()))
    if key not in ALLOWED_KEYS:
        raise BadRequestError(f"Invalid key. Allowed keys: {', '.join(ALLOWED_KEYS)}")
    return key, value
