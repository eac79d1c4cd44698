"""
MOSDL Intermediate Representation (IR) types.

This package contains the read-only specification tree the generators render.
Types are organized into logical submodules; all of them are re-exported here.
"""

# Data Types
from .datatypes import (
    AttributeType,
    CompositeType,
    DataType,
    EnumerationItem,
    EnumerationType,
    FundamentalType,
)

# Errors
from .errors import (
    ErrorDefinition,
    ErrorReference,
    OperationError,
)

# Operations
from .operations import (
    INTERACTION_STAGES,
    InteractionStage,
    InteractionType,
    Message,
    Operation,
)

# Specification Tree
from .specification import (
    Area,
    CapabilitySet,
    Service,
    Specification,
)

# Type References
from .types import (
    Comment,
    ElementReference,
    FieldSpec,
    TypeReference,
)

__all__ = [
    # Type References
    "Comment",
    "TypeReference",
    "ElementReference",
    "FieldSpec",
    # Data Types
    "AttributeType",
    "CompositeType",
    "DataType",
    "EnumerationItem",
    "EnumerationType",
    "FundamentalType",
    # Errors
    "ErrorDefinition",
    "ErrorReference",
    "OperationError",
    # Operations
    "INTERACTION_STAGES",
    "InteractionStage",
    "InteractionType",
    "Message",
    "Operation",
    # Specification Tree
    "Area",
    "CapabilitySet",
    "Service",
    "Specification",
]
