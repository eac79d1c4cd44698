"""
Error output for the MOSDL generator: area/service error definitions and the
``throws`` clause of operations.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core import ir
from ...core.config import DocType
from .context import RenderContext
from .docs import write_doc
from .names import escape_id, resolve_type


def write_extra_info(
    ctx: RenderContext, extra: ir.ElementReference | None, show_comment: bool
) -> None:
    """
    Write the ``: Type`` suffix of an error.

    A shown comment moves the type to its own line, one level deeper, below
    the comment.
    """
    if extra is None:
        return
    writer = ctx.writer
    if show_comment and extra.comment and ctx.doc_type != DocType.SUPPRESS:
        writer.write(":")
        writer.write_line()
        with writer.indented():
            write_doc(ctx, extra.comment)
            writer.write_indent()
            writer.write(resolve_type(ctx, extra.type))
    else:
        writer.write(": ", resolve_type(ctx, extra.type))


def _write_definition_head(ctx: RenderContext, error: ir.ErrorDefinition) -> None:
    ctx.writer.write("error ", escape_id(error.name), " [", error.number, "]")


def write_error_definitions(ctx: RenderContext, errors: Sequence[ir.ErrorDefinition]) -> None:
    """Write area- or service-level error definitions, each followed by a blank line."""
    writer = ctx.writer
    for error in errors:
        write_doc(ctx, error.comment)
        writer.write_indent()
        _write_definition_head(ctx, error)
        write_extra_info(ctx, error.extra_information, show_comment=True)
        writer.write_line()
        writer.write_line()


def _write_operation_error(ctx: RenderContext, error: ir.ErrorDefinition | ir.ErrorReference) -> None:
    if isinstance(error, ir.ErrorReference):
        ctx.writer.write(resolve_type(ctx, error.type))
    else:
        _write_definition_head(ctx, error)
    write_extra_info(ctx, error.extra_information, show_comment=ctx.shows_inline_docs)


def write_throws(ctx: RenderContext, errors: Sequence[ir.ErrorDefinition | ir.ErrorReference]) -> None:
    """
    Write the ``throws`` clause on a new line.

    Errors are listed on one line unless inline documentation has to be
    shown, in which case each error gets its own line one level deeper.
    """
    writer = ctx.writer
    writer.write_line()
    writer.write_indent()
    writer.write("throws")

    if not (ctx.shows_inline_docs and any(error.has_doc for error in errors)):
        writer.write(" ")
        for i, error in enumerate(errors):
            if i:
                writer.write(", ")
            _write_operation_error(ctx, error)
        return

    with writer.indented():
        writer.write_line()
        for i, error in enumerate(errors):
            if i:
                writer.write(",")
                writer.write_line()
            write_doc(ctx, error.comment)
            writer.write_indent()
            _write_operation_error(ctx, error)
