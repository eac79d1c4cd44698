"""
Documentation output for the MOSDL generator.

Comments are written as ``/// text`` when they fit on one line and as a
triple-quoted block otherwise. In BULK mode the documentation of an operation,
its messages, fields and errors is collected into a single block in front of
the operation, using tags such as ``@request:`` or ``@error <name>:``.
"""

from __future__ import annotations

import re

from ...core import ir
from ...core.config import DocType
from .context import RenderContext
from .names import resolve_type

DOC_LINE_MARKER = "/// "
DOC_BLOCK_MARKER = '"""'

# Tag of each stage in BULK documentation: the last part of its name,
# e.g. request_response -> response.
STAGE_TAGS: dict[ir.InteractionStage, str] = {
    stage: stage.value.rsplit("_", 1)[-1] for stage in ir.InteractionStage
}

_LINE_BREAK = re.compile(r"\r\n|\n")


def write_doc(ctx: RenderContext, doc: str | None) -> None:
    """Write a comment at the current indent, unless docs are suppressed."""
    if ctx.doc_type == DocType.SUPPRESS or not doc:
        return
    writer = ctx.writer
    if "\n" not in doc:
        writer.write_line(DOC_LINE_MARKER, doc)
        return
    writer.write_line(DOC_BLOCK_MARKER)
    for line in _LINE_BREAK.split(doc.strip()):
        if line:
            writer.write_line(line)
        else:
            writer.write_line()
    writer.write_line(DOC_BLOCK_MARKER)


def build_operation_doc(ctx: RenderContext, operation: ir.Operation) -> str:
    """Collect the documentation of an operation and its parts into one text."""
    lines = [operation.comment or ""]

    for message in operation.messages:
        tag = STAGE_TAGS[message.stage]
        if message.comment or message.fields:
            lines.append("")
        if message.comment:
            lines.append(f"@{tag}: {message.comment}")
        for field in message.fields:
            if field.comment:
                lines.append(f"@{tag}param {field.name}: {field.comment}")

    if any(error.has_doc for error in operation.errors):
        lines.append("")
    for error in operation.errors:
        name = error.display_name(lambda type_ref: resolve_type(ctx, type_ref))
        if error.comment:
            lines.append(f"@error {name}: {error.comment}")
        if error.extra_info_comment:
            lines.append(f"@errorinfo {name}: {error.extra_info_comment}")

    return "\n".join(lines)


def write_operation_doc(ctx: RenderContext, operation: ir.Operation) -> None:
    """Write the documentation shown in front of an operation."""
    if ctx.doc_type == DocType.SUPPRESS:
        return
    if ctx.doc_type == DocType.INLINE:
        write_doc(ctx, operation.comment)
        return

    doc = build_operation_doc(ctx, operation)
    if doc.strip():
        write_doc(ctx, doc)
