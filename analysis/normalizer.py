# SPDX-License-Identifier: AGPL-3.0-only

"""
Response normalization for model replies.

Models often wrap the requested JSON in markdown fences or surrounding prose.
The extraction here is deliberately permissive: strip the fences, take
everything from the first "{" to the last "}", and parse that.
"""
import json
import re
from typing import Any, Dict

from common.errors import FormatError

LEADING_FENCE = re.compile(r'^\s*```(?:json)?[ \t]*\n?', re.IGNORECASE)
TRAILING_FENCE = re.compile(r'\n?```\s*$')
JSON_OBJECT = re.compile(r'\{[\s\S]*\}')


def strip_code_fences(text: str) -> str:
    """Remove one leading ```/```json marker and one trailing ``` marker."""
    cleaned = LEADING_FENCE.sub('', text, count=1)
    cleaned = TRAILING_FENCE.sub('', cleaned, count=1)
    return cleaned.strip()


def parse_llm_response(text: str) -> Dict[str, Any]:
    """
    Parse a raw model reply into a JSON object.

    No schema validation happens here; the caller coerces the object into the
    task's result model.

    Raises:
        FormatError: reply is not text, holds no parseable JSON, or the JSON is not an object
    """
    if not isinstance(text, str):
        raise FormatError("Response is not a string", reason="invalid-json", raw=repr(text))

    working = strip_code_fences(text)

    match = JSON_OBJECT.search(working)
    if match:
        working = match.group(0)

    try:
        parsed = json.loads(working)
    except ValueError as e:
        raise FormatError(f"Could not parse JSON from response: {e}", reason="invalid-json", raw=working) from e

    if not isinstance(parsed, dict):
        raise FormatError("Response JSON is not an object", reason="not-an-object", raw=working)
    return parsed
