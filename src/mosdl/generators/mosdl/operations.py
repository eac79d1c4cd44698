"""
Operation output for the MOSDL generator.

An operation is written as its pattern keyword, name and number followed by
its messages. The first message follows the header on the same line; every
further message goes on a continuation line starting with ``->``::

    progress *monitor [3] (id: Identifier)
        -> (accepted: Boolean)
        -> (percent: UOctet)*
        -> (result: String)
        throws UNKNOWN

The ``*`` after a message marks it as repeatable. Publish-subscribe
operations have a single message flowing towards the consumer, written as
``<- (...)``.
"""

from __future__ import annotations

from ...core import ir
from .context import RenderContext
from .docs import write_doc, write_operation_doc
from .errors import write_throws
from .names import escape_id, resolve_type

CONTINUATION_PREFIX = "-> "
NOTIFY_PREFIX = "<- "
REPEAT_MARKER = "*"
REPLAY_MARKER = "*"

# Stages that may occur any number of times before the next one.
REPEATED_STAGES = frozenset({ir.InteractionStage.PROGRESS_UPDATE})


def format_field(ctx: RenderContext, field: ir.FieldSpec) -> str:
    return f"{escape_id(field.name)}: {resolve_type(ctx, field.type, field.can_be_null)}"


def write_message(ctx: RenderContext, message: ir.Message, prefix: str = "", continuation: bool = False) -> None:
    """
    Write the parenthesized field list of a message.

    The first message continues the operation header line; continuation
    messages start a new line. With inline docs a commented message starts
    on a line of its own below its comment, and a message with commented
    fields lists one field per line.
    """
    writer = ctx.writer
    inline = ctx.shows_inline_docs
    starts_line = continuation or (inline and bool(message.comment))

    if starts_line:
        writer.write_line()
    if inline:
        write_doc(ctx, message.comment)
    if starts_line:
        writer.write_indent()
    else:
        writer.write(" ")
    writer.write(prefix, "(")

    if inline and any(field.comment for field in message.fields):
        writer.write_line()
        with writer.indented():
            last = len(message.fields) - 1
            for i, field in enumerate(message.fields):
                write_doc(ctx, field.comment)
                writer.write_line(format_field(ctx, field), "," if i < last else "")
        writer.write_indent()
    else:
        writer.write(", ".join(format_field(ctx, field) for field in message.fields))

    writer.write(")")


def write_operation(ctx: RenderContext, operation: ir.Operation) -> None:
    """Write an operation with its documentation, followed by a blank line."""
    writer = ctx.writer
    write_operation_doc(ctx, operation)

    writer.write_indent()
    writer.write(operation.interaction.value, " ")
    if operation.support_in_replay:
        writer.write(REPLAY_MARKER)
    writer.write(escape_id(operation.name), " [", operation.number, "]")

    with writer.indented():
        first, *rest = operation.messages
        if operation.interaction == ir.InteractionType.PUBSUB:
            write_message(ctx, first, prefix=NOTIFY_PREFIX)
        else:
            write_message(ctx, first)
        previous = first
        for message in rest:
            if previous.stage in REPEATED_STAGES:
                writer.write(REPEAT_MARKER)
            write_message(ctx, message, prefix=CONTINUATION_PREFIX, continuation=True)
            previous = message

        if operation.errors:
            write_throws(ctx, operation.errors)

    writer.write_line()
    writer.write_line()
