"""Caller validation for lookup requests."""

from lexilookup.exceptions import CallerValidationError
from lexilookup.models import LookupOptions

DEFAULT_MAX_INPUTS = 500


def sanitize_inputs(inputs: list[str]) -> list[str]:
    """Trim inputs and drop blank entries."""
    return [entry.strip() for entry in inputs if entry.strip()]


def validate_request(
    inputs: object,
    options: object,
    max_inputs: int = DEFAULT_MAX_INPUTS,
) -> tuple[list[str], LookupOptions]:
    """Validate the shape of a lookup request before any work starts.

    Args:
        inputs: Raw inputs, expected to be a list of strings
        options: Raw options mapping (wire form)
        max_inputs: Maximum number of inputs accepted

    Returns:
        Tuple of (sanitized inputs, parsed options)

    Raises:
        CallerValidationError: If the request cannot be processed
    """
    if not isinstance(inputs, list) or not inputs:
        raise CallerValidationError("INVALID_REQUEST", "inputs must be a non-empty list")

    if not all(isinstance(entry, str) for entry in inputs):
        raise CallerValidationError("INVALID_REQUEST", "inputs must contain only strings")

    if len(inputs) > max_inputs:
        raise CallerValidationError(
            "VALIDATION_ERROR",
            f"Too many inputs: {len(inputs)} exceeds the maximum of {max_inputs}",
        )

    sanitized = sanitize_inputs(inputs)
    if not sanitized:
        raise CallerValidationError("VALIDATION_ERROR", "No valid inputs found")

    if options is None:
        raise CallerValidationError("INVALID_REQUEST", "options object is required")

    return sanitized, LookupOptions.from_dict(options)
