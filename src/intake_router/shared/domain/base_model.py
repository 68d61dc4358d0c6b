"""
Base domain model with camelCase JSON compatibility.

Structured specs arrive as camelCase JSON from the spec-extraction step.
All boundary models should inherit from BaseDomainModel so that both
camelCase and snake_case keys validate and serialization goes back to camelCase.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


def to_camel_case(snake_str: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        >>> to_camel_case("data_classification")
        'dataClassification'
        >>> to_camel_case("ux_needs")
        'uxNeeds'
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_snake_case(camel_str: str) -> str:
    """
    Convert camelCase to snake_case.

    Examples:
        >>> to_snake_case("dataClassification")
        'data_classification'
        >>> to_snake_case("uxNeeds")
        'ux_needs'
    """
    if not camel_str:
        return camel_str
    result = [camel_str[0].lower()]
    for char in camel_str[1:]:
        if char.isupper():
            result.extend(["_", char.lower()])
        else:
            result.append(char)
    return "".join(result)


def convert_keys_to_snake_case(data: Any) -> Any:
    """Recursively convert dictionary keys from camelCase to snake_case."""
    if isinstance(data, dict):
        return {
            to_snake_case(str(key)): convert_keys_to_snake_case(value)
            for key, value in data.items()
        }
    elif isinstance(data, list):
        return [convert_keys_to_snake_case(item) for item in data]
    else:
        return data


class BaseDomainModel(BaseModel):
    """
    Base class for all domain models.

    - Immutable once validated (frozen)
    - Accepts camelCase aliases and snake_case field names
    - Unknown keys are ignored (the extraction step may add fields)
    - to_json() serializes to camelCase with enums as their string values
    """

    model_config = ConfigDict(
        alias_generator=to_camel_case,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize to camelCase JSON.

        Returns:
            Dictionary with camelCase keys, enum values as strings, tuples as lists
        """
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_json(cls, data: Dict[str, Any]):
        """Deserialize from camelCase (or snake_case) JSON."""
        return cls.model_validate(data)
