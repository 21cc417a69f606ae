"""Declarative argument fields shared by tool schemas.

A tool's field list is the single source for both argument validation and the
JSON schema advertised to clients.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, Field

from wpmcp.serialization import create_model_from_field_definitions

Order = Literal["asc", "desc"]
RequestContext = Literal["view", "embed", "edit"]
PostStatus = Literal["publish", "future", "draft", "pending", "private"]
OpenClosed = Literal["open", "closed"]


@dataclass(frozen=True)
class FieldSpec:
    """One tool argument: its type, whether it is required, and its constraints."""

    name: str
    type: Any
    description: str = ""
    required: bool = False
    default: Any = None
    ge: float | None = None
    le: float | None = None

    def to_definition(self) -> tuple[Any, Any]:
        constraints = {}
        if self.ge is not None:
            constraints["ge"] = self.ge
        if self.le is not None:
            constraints["le"] = self.le

        if self.required:
            return self.type, Field(description=self.description, **constraints)
        return (
            self.type | None,
            Field(default=self.default, description=self.description, **constraints),
        )

    def optional(self) -> "FieldSpec":
        """Copy of this field that may be omitted (used to derive update schemas)."""
        return FieldSpec(
            name=self.name,
            type=self.type,
            description=self.description,
            ge=self.ge,
            le=self.le,
        )


def build_args_model(model_name: str, fields: Iterable[FieldSpec]) -> type[BaseModel]:
    definitions: dict[str, tuple[Any, Any]] = {}
    for spec in fields:
        if spec.name in definitions:
            raise ValueError(f"Duplicate field {spec.name!r} in {model_name}")
        definitions[spec.name] = spec.to_definition()
    return create_model_from_field_definitions(model_name, definitions)


def identifier(name: str = "id", description: str = "Unique identifier") -> FieldSpec:
    return FieldSpec(name, int, description, required=True)


def pagination() -> tuple[FieldSpec, ...]:
    return (
        FieldSpec("page", int, "Page of the collection to return", ge=1),
        FieldSpec("per_page", int, "Maximum number of items per page (1-100)", ge=1, le=100),
    )


def ordering(orderby: Any) -> tuple[FieldSpec, ...]:
    return (
        FieldSpec("order", Order, "Sort direction"),
        FieldSpec("orderby", orderby, "Attribute to sort the collection by"),
    )


def force(description: str = "Bypass the trash and delete permanently") -> FieldSpec:
    return FieldSpec("force", bool, description, default=False)
