"""Request decoding — raw request body to a list of hand strings.

The body must be a JSON object with a "hands" array of strings; anything
else fails the whole request with MalformedRequestError.
"""

from __future__ import annotations

import json

import jsonschema

from pokerhands.core.errors import MalformedRequestError
from pokerhands.core.schemas import packaged_schema


def decode_request(body: bytes | str) -> list[str]:
    """Parse and validate a request body, returning its hands in order."""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedRequestError(f"Body is not UTF-8: {e}") from e

    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedRequestError(f"JSON parse error: {e}") from e

    try:
        jsonschema.validate(parsed, packaged_schema("hands_request"))
    except jsonschema.ValidationError as e:
        raise MalformedRequestError(f"Schema validation: {e.message}") from e

    return list(parsed["hands"])
