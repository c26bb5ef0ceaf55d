"""Shared pydantic base and coercion helpers for wire models."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys and populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump to a JSON-ready dict using the camelCase aliases."""
        return self.model_dump(by_alias=True, mode="json")


def coerce_str_list(value: Any) -> List[str]:
    """Normalize LLM output into a list of non-empty strings.

    Models sometimes emit a comma-separated string or null instead of an array.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    return [str(value)]


def coerce_str(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default
