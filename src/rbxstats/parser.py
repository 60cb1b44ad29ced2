"""Response body parsing for rbxstats.

The API answers with JSON, but the client has always exposed responses as a
flat ``dict[str, str]``. ``parse_json`` is the historical quote scanner and
stays the default; ``parse_strict`` decodes real JSON into the same shape.
"""

import json
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


def parse_json(response: str) -> Dict[str, str]:
    """Extract alternating quoted key/value tokens from a response body.

    Not a JSON parser: nesting, arrays, numbers, booleans and escapes are not
    understood. Only quoted tokens are read, in pairs.

    Examples:
        '{"a":"1","b":"2"}' -> {"a": "1", "b": "2"}
        '{"a":{"b":"1"}}'   -> {"a": "b"}
    """
    result: Dict[str, str] = {}
    key = ""
    value = ""
    in_quotes = False
    reading_value = False

    for ch in response:
        if ch == '"':
            in_quotes = not in_quotes
            # An empty key never closes, so "" keeps collecting into the key
            if not in_quotes and key:
                if not reading_value:
                    reading_value = True
                else:
                    result[key] = value
                    key = ""
                    value = ""
                    reading_value = False
        elif in_quotes:
            if reading_value:
                value += ch
            else:
                key += ch

    return result


def _to_text(value: Any) -> str:
    """Render a decoded JSON value as the string the flat mapping stores"""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, bool)) or value is None:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def parse_strict(response: str) -> Dict[str, str]:
    """Decode a JSON object body into a flat string mapping.

    Top-level scalars become strings; nested objects and arrays are kept as
    compact JSON text. Anything that is not a JSON object yields ``{}``.
    """
    if not response.strip():
        return {}

    try:
        data = json.loads(response)
    except json.JSONDecodeError as e:
        logger.warning("Response is not valid JSON: %s", e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Expected a JSON object, got %s", type(data).__name__)
        return {}

    return {str(key): _to_text(value) for key, value in data.items()}
