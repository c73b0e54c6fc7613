"""Parameter schema generation for tool request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

# Keys kept from pydantic's per-field JSON schema.
_PROPERTY_KEYS = ("type", "description", "items", "enum", "anyOf")


def params_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Build the advertised parameter schema for a request model.

    The result is a flat OpenAPI-style object schema::

        {"type": "object", "properties": {...}, "required": [...]}

    Args:
        model: The pydantic request model of a tool.

    Returns:
        Schema dict with one entry per model field.
    """
    raw = model.model_json_schema()
    properties: dict[str, Any] = {}
    for name, spec in raw.get("properties", {}).items():
        properties[name] = {key: spec[key] for key in _PROPERTY_KEYS if key in spec}

    return {
        "type": "object",
        "properties": properties,
        "required": list(raw.get("required", [])),
    }
