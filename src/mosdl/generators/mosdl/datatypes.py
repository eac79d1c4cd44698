"""
Data type output for the MOSDL generator.
"""

from __future__ import annotations

from collections.abc import Sequence

from ...core import ir
from .context import RenderContext
from .docs import write_doc
from .names import escape_id, resolve_type
from .operations import format_field


def _write_composite(ctx: RenderContext, composite: ir.CompositeType) -> None:
    writer = ctx.writer
    write_doc(ctx, composite.comment)
    writer.write_indent()
    if composite.is_abstract:
        writer.write("abstract composite ", escape_id(composite.name))
    else:
        writer.write("composite ", escape_id(composite.name), " [", composite.short_form_part, "]")
        if composite.extends is not None:
            writer.write(" extends ", resolve_type(ctx, composite.extends.type))
    writer.write(" {")
    writer.write_line()
    with writer.indented():
        for field in composite.fields:
            write_doc(ctx, field.comment)
            writer.write_line(format_field(ctx, field))
    writer.write_line("}")


def _write_enumeration(ctx: RenderContext, enumeration: ir.EnumerationType) -> None:
    writer = ctx.writer
    write_doc(ctx, enumeration.comment)
    writer.write_line("enum ", escape_id(enumeration.name), " [", enumeration.short_form_part, "] {")
    with writer.indented():
        for item in enumeration.items:
            write_doc(ctx, item.comment)
            writer.write_line(escape_id(item.value), " [", item.nvalue, "]")
    writer.write_line("}")


def _write_attribute(ctx: RenderContext, attribute: ir.AttributeType) -> None:
    write_doc(ctx, attribute.comment)
    ctx.writer.write_line("attribute ", escape_id(attribute.name), " [", attribute.short_form_part, "]")


def _write_fundamental(ctx: RenderContext, fundamental: ir.FundamentalType) -> None:
    extension = ""
    if fundamental.extends is not None:
        extension = " extends " + resolve_type(ctx, fundamental.extends.type)
    write_doc(ctx, fundamental.comment)
    ctx.writer.write_line("fundamental ", escape_id(fundamental.name), extension)


_WRITERS = {
    "composite": _write_composite,
    "enumeration": _write_enumeration,
    "attribute": _write_attribute,
    "fundamental": _write_fundamental,
}


def write_data_type(ctx: RenderContext, data_type: ir.DataType) -> None:
    """Write a single data type definition."""
    _WRITERS[data_type.kind](ctx, data_type)


def write_data_types(ctx: RenderContext, data_types: Sequence[ir.DataType]) -> None:
    """Write data type definitions, each followed by a blank line."""
    for data_type in data_types:
        write_data_type(ctx, data_type)
        ctx.writer.write_line()
