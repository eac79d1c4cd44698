"""
Specification tree types for MOSDL IR.

This module contains the containers of the specification: the top-level
specification, its areas, their services and the services' capability sets.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .datatypes import DataType
from .errors import ErrorDefinition
from .operations import Operation
from .types import Comment


class CapabilitySet(BaseModel):
    """
    Group of operations within a service.

    Attributes:
        number: Capability set number (optional)
        operations: Operations in declaration order
        comment: Optional documentation
    """

    number: int | None = None
    operations: list[Operation] = Field(default_factory=list)
    comment: Comment = None

    model_config = ConfigDict(frozen=True)


class Service(BaseModel):
    """
    A service of an area.

    Attributes:
        name: Service name
        number: Service number within the area
        capability_sets: Capability sets in declaration order
        data_types: Service-level data types
        errors: Service-level error definitions
        comment: Optional documentation
    """

    name: str
    number: int
    capability_sets: list[CapabilitySet] = Field(default_factory=list, alias="capabilitySets")
    data_types: list[DataType] = Field(default_factory=list, alias="dataTypes")
    errors: list[ErrorDefinition] = Field(default_factory=list)
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Area(BaseModel):
    """
    Top-level unit of a specification. Each area is rendered to its own output.

    Attributes:
        name: Area name
        number: Area number
        version: Area version (1 is the default and is not printed)
        services: Services in declaration order
        data_types: Area-level data types
        errors: Area-level error definitions
        comment: Optional documentation
    """

    name: str
    number: int
    version: int = 1
    services: list[Service] = Field(default_factory=list)
    data_types: list[DataType] = Field(default_factory=list, alias="dataTypes")
    errors: list[ErrorDefinition] = Field(default_factory=list)
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Specification(BaseModel):
    """Complete service specification: an ordered list of areas."""

    areas: list[Area] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_area(self, name: str) -> Area | None:
        """Get an area by name."""
        for area in self.areas:
            if area.name == name:
                return area
        return None
