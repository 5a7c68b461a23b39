"""
Classification request validation.

The endpoint reads the raw request so it can answer with its own error
bodies; these helpers enforce the request contract in order:
content type, JSON body, message presence, message length.

Dependencies: premier_guard.core.exceptions
System role: Request validation for POST /
"""

import json
from typing import Any

from premier_guard.core.exceptions import (
    InvalidContentTypeError,
    MissingArgumentError,
    PayloadTooLargeError,
)

JSON_MEDIA_TYPE = "application/json"


def validate_content_type(content_type: str | None) -> None:
    """
    Require a JSON media type (parameters such as charset are allowed).

    Raises:
        InvalidContentTypeError: If the header is missing or not JSON
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type != JSON_MEDIA_TYPE:
        raise InvalidContentTypeError(content_type)


def parse_body(raw_body: bytes, content_type: str | None = None) -> Any:
    """
    Decode the JSON request body.

    Raises:
        InvalidContentTypeError: If the body is not valid JSON
    """
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidContentTypeError(content_type) from e


def extract_message(body: Any, max_length: int) -> str:
    """
    Pull a usable message out of the decoded body.

    Args:
        body: Decoded JSON payload
        max_length: Maximum accepted length (inclusive)

    Returns:
        str: The message

    Raises:
        MissingArgumentError: Message absent, empty or not a string
        PayloadTooLargeError: Message longer than max_length
    """
    message = body.get("message") if isinstance(body, dict) else None
    if not isinstance(message, str) or not message:
        raise MissingArgumentError("message")

    if len(message) > max_length:
        raise PayloadTooLargeError(len(message), max_length)

    return message
