"""
Type reference types for MOSDL IR.

This module contains the building blocks shared by every other IR module:
references to named types, references that carry a comment, and the named,
typed fields used by messages and composites.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


# Documentation text. Empty and whitespace-only comments are stored as None.
Comment = Annotated[str | None, AfterValidator(_blank_to_none)]


class TypeReference(BaseModel):
    """
    Reference to a type defined in an area or a service.

    Nullability is not part of the reference; it belongs to the field that
    uses it.

    Examples:
        - MAL::Identifier: TypeReference(area="MAL", name="Identifier")
        - List<COM.ObjectId>: TypeReference(area="COM", service="COM", name="ObjectId", is_list=True)

    Attributes:
        area: Name of the area defining the type
        service: Name of the service defining the type (None for area-level types)
        name: Type name
        is_list: Whether the reference denotes a list of the type
    """

    area: str
    service: str | None = None
    name: str
    is_list: bool = Field(default=False, alias="list")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ElementReference(BaseModel):
    """
    Type reference with an optional comment.

    Used for composite supertypes and error extra information.
    """

    type: TypeReference
    comment: Comment = None

    model_config = ConfigDict(frozen=True)


class FieldSpec(BaseModel):
    """
    Named, typed element of a message or composite.

    Attributes:
        name: Field name
        type: Referenced type
        can_be_null: Whether the field is nullable
        comment: Optional documentation
    """

    name: str
    type: TypeReference
    can_be_null: bool = Field(default=False, alias="canBeNull")
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)
