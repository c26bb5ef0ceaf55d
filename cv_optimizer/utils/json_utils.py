import json
import re
from typing import Any, Dict, List, Optional

from cv_optimizer.error_handling.exceptions import LLMResponseParsingError

_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")
_GREEDY_ARRAY = re.compile(r"\[[\s\S]*\]")
_FENCED_JSON_OBJECT = re.compile(r"```json\s*(\{[\s\S]*?\})\s*```")
_FENCED_OBJECT = re.compile(r"```\s*(\{[\s\S]*?\})\s*```")


def extract_json_object(response: str) -> Optional[str]:
    """
    Find the JSON object embedded in an LLM response.

    The widest ``{...}`` span wins; fenced code blocks are tried after it.

    Args:
        response: Raw response from LLM

    Returns:
        The candidate JSON text, or None if the response holds no object
    """
    if not response:
        return None
    match = _GREEDY_OBJECT.search(response)
    if match:
        return match.group(0)
    for pattern in (_FENCED_JSON_OBJECT, _FENCED_OBJECT):
        match = pattern.search(response)
        if match:
            return match.group(1)
    return None


def extract_json_array(response: str) -> Optional[str]:
    """Find the widest ``[...]`` span in an LLM response."""
    if not response:
        return None
    match = _GREEDY_ARRAY.search(response)
    return match.group(0) if match else None


def parse_json_object(response: str) -> Dict[str, Any]:
    """
    Parse the JSON object embedded in an LLM response.

    Raises:
        LLMResponseParsingError: If no object is found or it is not valid JSON
    """
    candidate = extract_json_object(response)
    if candidate is None:
        raise LLMResponseParsingError("No JSON object found in response", raw_response=response or "")
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise LLMResponseParsingError(f"Invalid JSON object: {e}", raw_response=response) from e
    if not isinstance(parsed, dict):
        raise LLMResponseParsingError("Expected a JSON object", raw_response=response)
    return parsed


def parse_json_array(response: str) -> List[Any]:
    """
    Parse the JSON array embedded in an LLM response.

    Raises:
        LLMResponseParsingError: If no array is found or it is not valid JSON
    """
    candidate = extract_json_array(response)
    if candidate is None:
        raise LLMResponseParsingError("No JSON array found in response", raw_response=response or "")
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise LLMResponseParsingError(f"Invalid JSON array: {e}", raw_response=response) from e
    if not isinstance(parsed, list):
        raise LLMResponseParsingError("Expected a JSON array", raw_response=response)
    return parsed
