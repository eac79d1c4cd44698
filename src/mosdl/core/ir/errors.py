"""
Error types for MOSDL IR.

Areas and services define errors; operations either define errors of their
own or reference existing ones. Both variants can appear in an operation's
``throws`` clause and share one interface (comment, extra information,
display name).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .types import Comment, ElementReference, TypeReference


class _OperationErrorBase(BaseModel):
    """Attributes shared by error definitions and error references."""

    comment: Comment = None
    extra_information: ElementReference | None = Field(default=None, alias="extraInformation")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def extra_info_type(self) -> TypeReference | None:
        """Type of the extra information, if any."""
        return self.extra_information.type if self.extra_information else None

    @property
    def extra_info_comment(self) -> str | None:
        """Comment attached to the extra information, if any."""
        return self.extra_information.comment if self.extra_information else None

    @property
    def has_doc(self) -> bool:
        """Whether the error or its extra information carries a comment."""
        return bool(self.comment) or bool(self.extra_info_comment)

    def display_name(self, resolve: Callable[[TypeReference], str]) -> str:
        """
        Name used for the error in docs and ``throws`` clauses.

        Overridden by both variants: definitions use their own name,
        references resolve their type with ``resolve``.
        """
        raise NotImplementedError


class ErrorDefinition(_OperationErrorBase):
    """
    A newly introduced error.

    Attributes:
        name: Error name
        number: Numeric error code
        comment: Optional documentation
        extra_information: Optional type (and comment) of extra error data
    """

    kind: Literal["definition"] = "definition"
    name: str
    number: int

    def display_name(self, resolve: Callable[[TypeReference], str]) -> str:
        return self.name


class ErrorReference(_OperationErrorBase):
    """
    Reuse of an error defined elsewhere.

    The extra information may narrow the type of the referenced error's extra
    data.
    """

    kind: Literal["reference"] = "reference"
    type: TypeReference

    def display_name(self, resolve: Callable[[TypeReference], str]) -> str:
        return resolve(self.type)


OperationError = Annotated[ErrorDefinition | ErrorReference, Field(discriminator="kind")]
