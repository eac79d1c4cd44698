"""
Data type definitions for MOSDL IR.

This module contains the four kinds of data types an area or a service can
define: composites, enumerations, attributes and fundamentals.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .types import Comment, ElementReference, FieldSpec


class CompositeType(BaseModel):
    """
    Structured type with an ordered list of fields.

    A composite without a short form part (or with short form part 0) is
    abstract.

    Attributes:
        name: Type name
        short_form_part: Numeric type id, None for abstract composites
        extends: Optional supertype
        fields: Ordered fields
        comment: Optional documentation
    """

    kind: Literal["composite"] = "composite"
    name: str
    short_form_part: int | None = Field(default=None, alias="shortFormPart")
    extends: ElementReference | None = None
    fields: list[FieldSpec] = Field(default_factory=list)
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_abstract(self) -> bool:
        return not self.short_form_part


class EnumerationItem(BaseModel):
    """Single value of an enumeration."""

    value: str
    nvalue: int
    comment: Comment = None

    model_config = ConfigDict(frozen=True)


class EnumerationType(BaseModel):
    """Enumeration with ordered items."""

    kind: Literal["enumeration"] = "enumeration"
    name: str
    short_form_part: int = Field(alias="shortFormPart")
    items: list[EnumerationItem] = Field(default_factory=list)
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class AttributeType(BaseModel):
    """Attribute (primitive) type."""

    kind: Literal["attribute"] = "attribute"
    name: str
    short_form_part: int = Field(alias="shortFormPart")
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class FundamentalType(BaseModel):
    """Fundamental (non-instantiable) type, optionally extending another."""

    kind: Literal["fundamental"] = "fundamental"
    name: str
    extends: ElementReference | None = None
    comment: Comment = None

    model_config = ConfigDict(frozen=True)


DataType = Annotated[
    CompositeType | EnumerationType | AttributeType | FundamentalType,
    Field(discriminator="kind"),
]
