"""Fast JSON decoding and encoding for design documents."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def extract_json_boundaries(text: str) -> tuple[str, int, int] | None:
    """
    Locate the JSON object inside text that may carry markdown fences.

    Returns:
        (working_text, start, end) or None if no object is present
    """
    working_text = text

    if "```" in working_text:
        if "```json" in working_text:
            start_marker = working_text.find("```json") + 7
        else:
            start_marker = working_text.find("```") + 3

        end_marker = working_text.find("```", start_marker)
        if end_marker != -1:
            working_text = working_text[start_marker:end_marker].strip()

    start = working_text.find("{")
    end = working_text.rfind("}")

    if start == -1 or end == -1 or end < start:
        return None

    return (working_text, start, end + 1)


def _require_object(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Extract and parse a JSON object from text.

    msgspec is tried first; when it fails and ``repair`` is set the text is
    passed through json_repair (trailing commas, single quotes, unclosed
    brackets left behind by hand edits).

    Raises:
        JSONParseError: If no object can be recovered
    """
    boundaries = extract_json_boundaries(text.strip())
    if boundaries is None:
        raise JSONParseError("No JSON object found in text")

    working_text, start, end = boundaries
    json_str = working_text[start:end]

    try:
        return _require_object(msgspec.json.decode(json_str.encode("utf-8")))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    try:
        repaired = repair_json(json_str)
        return _require_object(json.loads(repaired))
    except (ValueError, TypeError) as e:
        raise JSONParseError(f"JSON repair failed: {e}", e) from e


def safe_json_dumps(obj: Any) -> str:
    """
    Encode object to compact JSON, preserving key order.

    orjson rejects integers outside the 64-bit range; those go through the
    stdlib encoder.
    """
    try:
        return orjson.dumps(obj).decode("utf-8")
    except TypeError:
        return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Reject payloads larger than max_size bytes (UTF-8 encoded).

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 64, current_depth: int = 0) -> None:
    """
    Reject nesting deeper than max_depth.

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
