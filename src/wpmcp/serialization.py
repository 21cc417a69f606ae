"""Dynamic pydantic model creation for tool arguments."""

from typing import Any

from pydantic import BaseModel, ConfigDict, create_model


def create_model_from_field_definitions(
    model_name: str,
    field_definitions: dict[str, tuple[Any, Any]],
    config: ConfigDict | None = None,
) -> type[BaseModel]:
    """Create a Pydantic model from field definitions.

    Args:
        model_name: Name for the generated model class
        field_definitions: Dict mapping field names to (type, FieldInfo) tuples
        config: Optional Pydantic config; by default values must already have the
            declared type, unknown keys are dropped and the advertised schema
            forbids additional properties

    Returns:
        Dynamically created Pydantic model class
    """
    if config is None:
        config = ConfigDict(
            extra="ignore",
            strict=True,
            json_schema_extra={"additionalProperties": False},
        )

    return create_model(model_name, __config__=config, **field_definitions)  # type: ignore
