"""Sanitize-then-decode step for JSON returned by language models."""

import json

from lexilookup.exceptions import MalformedPayloadError
from lexilookup.utils import strip_code_fences


def decode_json_payload(text: str) -> dict:
    """Decode a JSON object from model output.

    Code-fence markers are stripped first. Anything that does not decode to a
    JSON object is reported as a malformed payload rather than a raw parse
    exception.

    Args:
        text: Raw model output

    Returns:
        Decoded JSON object

    Raises:
        MalformedPayloadError: If the text is empty, invalid JSON, or not an object
    """
    cleaned = strip_code_fences(text or "")
    if not cleaned:
        raise MalformedPayloadError("Model returned an empty response")

    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedPayloadError(f"Model response is not valid JSON: {e.msg}") from e

    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Model response is a JSON {type(payload).__name__}, expected an object"
        )

    return payload
