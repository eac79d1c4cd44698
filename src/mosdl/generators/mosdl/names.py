"""
Identifier escaping and type name resolution for MOSDL output.
"""

from __future__ import annotations

from ...core import ir
from .context import RenderContext

MAL_AREA = "MAL"

# Types of the MAL area that are always printed without qualification.
MAL_FUNDAMENTALS = frozenset(
    {
        "Blob",
        "Boolean",
        "Double",
        "Duration",
        "FineTime",
        "Float",
        "Identifier",
        "Integer",
        "Long",
        "Octet",
        "Short",
        "String",
        "Time",
        "UInteger",
        "ULong",
        "UOctet",
        "URI",
        "UShort",
        "Attribute",
        "Composite",
        "Element",
    }
)

KEYWORDS = frozenset(
    {
        "area",
        "service",
        "composite",
        "enum",
        "attribute",
        "fundamental",
        "error",
        "extends",
        "import",
        "throws",
        "abstract",
        "capability",
        "send",
        "submit",
        "request",
        "invoke",
        "progress",
        "pubsub",
    }
)


def escape_id(identifier: str) -> str:
    """Quote an identifier that is a MOSDL keyword."""
    if identifier in KEYWORDS:
        return f'"{identifier}"'
    return identifier


def is_mal_fundamental(type_ref: ir.TypeReference) -> bool:
    return (
        type_ref.area == MAL_AREA
        and type_ref.service is None
        and type_ref.name in MAL_FUNDAMENTALS
    )


def resolve_type(ctx: RenderContext, type_ref: ir.TypeReference, can_be_null: bool = False) -> str:
    """
    Render a type reference relative to the area and service being rendered.

    Examples (rendering area ``test``, service ``Svc``):
        - MAL::Identifier -> ``Identifier``
        - test::Svc.Foo -> ``Foo``
        - test::Bar (area level) -> ``test::Bar``
        - other::Svc.Baz, list, nullable -> ``List?<other::Svc.Baz>``
    """
    same_area = ctx.area is not None and ctx.area.name == type_ref.area
    same_service = ctx.service is not None and ctx.service.name == type_ref.service

    parts: list[str] = []
    if type_ref.is_list:
        parts.append("List?<" if can_be_null else "List<")
    # Same area alone is not enough: a type of the same name may exist both in
    # the area and in the service.
    if not is_mal_fundamental(type_ref) and not (same_area and same_service):
        parts.append(f"{escape_id(type_ref.area)}::")
    if type_ref.service is not None and not same_service:
        parts.append(f"{escape_id(type_ref.service)}.")
    parts.append(escape_id(type_ref.name))
    if type_ref.is_list:
        parts.append(">")
    elif can_be_null:
        parts.append("?")
    return "".join(parts)
