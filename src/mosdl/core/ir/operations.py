"""
Operation types for MOSDL IR.

This module contains the interaction patterns, their message stages and the
operation model. Each interaction pattern has a fixed sequence of messages;
the operation model enforces that sequence when it is built.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import OperationError
from .types import Comment, FieldSpec


class InteractionType(str, Enum):
    """Interaction patterns an operation can follow."""

    SEND = "send"
    SUBMIT = "submit"
    REQUEST = "request"
    INVOKE = "invoke"
    PROGRESS = "progress"
    PUBSUB = "pubsub"


class InteractionStage(str, Enum):
    """All message stages of all interaction patterns."""

    SEND = "send"
    SUBMIT = "submit"
    SUBMIT_ACK = "submit_ack"
    SUBMIT_ACK_ERROR = "submit_ack_error"
    REQUEST = "request"
    REQUEST_RESPONSE = "request_response"
    REQUEST_RESPONSE_ERROR = "request_response_error"
    INVOKE = "invoke"
    INVOKE_ACK = "invoke_ack"
    INVOKE_ACK_ERROR = "invoke_ack_error"
    INVOKE_RESPONSE = "invoke_response"
    INVOKE_RESPONSE_ERROR = "invoke_response_error"
    PROGRESS = "progress"
    PROGRESS_ACK = "progress_ack"
    PROGRESS_ACK_ERROR = "progress_ack_error"
    PROGRESS_UPDATE = "progress_update"
    PROGRESS_UPDATE_ERROR = "progress_update_error"
    PROGRESS_RESPONSE = "progress_response"
    PROGRESS_RESPONSE_ERROR = "progress_response_error"
    PUBSUB_REGISTER = "pubsub_register"
    PUBSUB_REGISTER_ACK = "pubsub_register_ack"
    PUBSUB_REGISTER_ERROR = "pubsub_register_error"
    PUBSUB_PUBLISH_REGISTER = "pubsub_publish_register"
    PUBSUB_PUBLISH_REGISTER_ACK = "pubsub_publish_register_ack"
    PUBSUB_PUBLISH_REGISTER_ERROR = "pubsub_publish_register_error"
    PUBSUB_PUBLISH = "pubsub_publish"
    PUBSUB_PUBLISH_ERROR = "pubsub_publish_error"
    PUBSUB_NOTIFY = "pubsub_notify"
    PUBSUB_NOTIFY_ERROR = "pubsub_notify_error"
    PUBSUB_DEREGISTER = "pubsub_deregister"
    PUBSUB_DEREGISTER_ACK = "pubsub_deregister_ack"
    PUBSUB_PUBLISH_DEREGISTER = "pubsub_publish_deregister"
    PUBSUB_PUBLISH_DEREGISTER_ACK = "pubsub_publish_deregister_ack"


# Message stages carrying a body, in rendering order, per interaction pattern.
INTERACTION_STAGES: dict[InteractionType, tuple[InteractionStage, ...]] = {
    InteractionType.SEND: (InteractionStage.SEND,),
    InteractionType.SUBMIT: (InteractionStage.SUBMIT,),
    InteractionType.REQUEST: (
        InteractionStage.REQUEST,
        InteractionStage.REQUEST_RESPONSE,
    ),
    InteractionType.INVOKE: (
        InteractionStage.INVOKE,
        InteractionStage.INVOKE_ACK,
        InteractionStage.INVOKE_RESPONSE,
    ),
    InteractionType.PROGRESS: (
        InteractionStage.PROGRESS,
        InteractionStage.PROGRESS_ACK,
        InteractionStage.PROGRESS_UPDATE,
        InteractionStage.PROGRESS_RESPONSE,
    ),
    InteractionType.PUBSUB: (InteractionStage.PUBSUB_PUBLISH,),
}


class Message(BaseModel):
    """
    One message of an interaction.

    Attributes:
        stage: Interaction stage the message belongs to
        fields: Ordered message body fields
        comment: Optional documentation
    """

    stage: InteractionStage
    fields: list[FieldSpec] = Field(default_factory=list)
    comment: Comment = None

    model_config = ConfigDict(frozen=True)


class Operation(BaseModel):
    """
    An operation of a capability set.

    Messages may be given without a stage; they are then assigned the
    pattern's stages in order.

    Attributes:
        name: Operation name
        number: Operation number within the service
        interaction: Interaction pattern
        messages: One message per stage of the pattern
        errors: Errors the operation may raise (not allowed for SEND)
        support_in_replay: Whether the operation may be invoked during replay
        comment: Optional documentation
    """

    name: str
    number: int
    interaction: InteractionType
    messages: list[Message] = Field(default_factory=list)
    errors: list[OperationError] = Field(default_factory=list)
    support_in_replay: bool = Field(default=False, alias="supportInReplay")
    comment: Comment = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def assign_message_stages(cls, data: Any) -> Any:
        """Fill in missing message stages from the interaction pattern."""
        if not isinstance(data, dict):
            return data
        messages = data.get("messages")
        try:
            stages = INTERACTION_STAGES[InteractionType(data.get("interaction"))]
        except ValueError:
            return data
        if not isinstance(messages, list):
            return data

        assigned = []
        for stage, message in zip(stages, messages):
            if isinstance(message, dict) and "stage" not in message:
                message = {**message, "stage": stage}
            assigned.append(message)
        assigned.extend(messages[len(stages) :])
        return {**data, "messages": assigned}

    @model_validator(mode="after")
    def check_message_sequence(self) -> Operation:
        """Ensure the messages follow the stages of the interaction pattern."""
        stages = INTERACTION_STAGES[self.interaction]
        if len(self.messages) != len(stages):
            raise ValueError(
                f"{self.interaction.value} operation '{self.name}' needs {len(stages)} "
                f"message(s), got {len(self.messages)}"
            )
        actual = tuple(message.stage for message in self.messages)
        if actual != stages:
            raise ValueError(
                f"{self.interaction.value} operation '{self.name}' expects stages "
                f"{[stage.value for stage in stages]}, got {[stage.value for stage in actual]}"
            )
        if self.interaction == InteractionType.SEND and self.errors:
            raise ValueError(f"send operation '{self.name}' cannot declare errors")
        return self
