"""Tests for data type and error definition output."""

from __future__ import annotations

from collections.abc import Callable

from mosdl.core import ir
from mosdl.core.config import DocType
from mosdl.generators.mosdl import RenderContext
from mosdl.generators.mosdl.datatypes import write_data_type, write_data_types
from mosdl.generators.mosdl.errors import write_error_definitions

MakeContext = Callable[..., RenderContext]


def _mal(name: str) -> ir.TypeReference:
    return ir.TypeReference(area="MAL", name=name)


def _render(ctx: RenderContext, data_type: ir.DataType) -> str:
    write_data_type(ctx, data_type)
    return ctx.writer.stream.getvalue()


class TestComposite:
    def test_concrete_with_supertype(self, service_context: MakeContext) -> None:
        composite = ir.CompositeType(
            name="Pair",
            short_form_part=4,
            extends=ir.ElementReference(type=_mal("Composite")),
            fields=[
                ir.FieldSpec(name="first", type=_mal("Long"), comment="First value"),
                ir.FieldSpec(name="second", type=_mal("Long"), can_be_null=True),
            ],
        )
        assert _render(service_context(), composite) == (
            "composite Pair [4] extends Composite {\n"
            "\t/// First value\n"
            "\tfirst: Long\n"
            "\tsecond: Long?\n"
            "}\n"
        )

    def test_abstract(self, service_context: MakeContext) -> None:
        composite = ir.CompositeType(name="Base", extends=ir.ElementReference(type=_mal("Composite")))
        assert _render(service_context(), composite) == "abstract composite Base {\n}\n"

    def test_service_level_field_types(self, service_context: MakeContext) -> None:
        composite = ir.CompositeType(
            name="Holder",
            short_form_part=1,
            fields=[
                ir.FieldSpec(name="local", type=ir.TypeReference(area="test", service="Svc", name="Item")),
                ir.FieldSpec(name="shared", type=ir.TypeReference(area="test", name="Item")),
            ],
        )
        assert _render(service_context(), composite) == (
            "composite Holder [1] {\n\tlocal: Item\n\tshared: test::Item\n}\n"
        )


class TestOtherDataTypes:
    def test_enumeration(self, service_context: MakeContext) -> None:
        enumeration = ir.EnumerationType(
            name="Mode",
            short_form_part=3,
            comment="Operating mode",
            items=[
                ir.EnumerationItem(value="ON", nvalue=1, comment="Running"),
                ir.EnumerationItem(value="OFF", nvalue=2),
            ],
        )
        assert _render(service_context(), enumeration) == (
            "/// Operating mode\nenum Mode [3] {\n\t/// Running\n\tON [1]\n\tOFF [2]\n}\n"
        )

    def test_attribute(self, service_context: MakeContext) -> None:
        attribute = ir.AttributeType(name="Flag", short_form_part=2)
        assert _render(service_context(), attribute) == "attribute Flag [2]\n"

    def test_fundamental(self, service_context: MakeContext) -> None:
        plain = ir.FundamentalType(name="Element")
        derived = ir.FundamentalType(name="Any", extends=ir.ElementReference(type=_mal("Element")))
        assert _render(service_context(), plain) == "fundamental Element\n"
        assert _render(service_context(), derived) == "fundamental Any extends Element\n"

    def test_keyword_name_escaped(self, service_context: MakeContext) -> None:
        assert _render(service_context(), ir.AttributeType(name="enum", short_form_part=1)) == (
            'attribute "enum" [1]\n'
        )

    def test_each_followed_by_blank_line(self, service_context: MakeContext) -> None:
        ctx = service_context()
        write_data_types(
            ctx,
            [ir.AttributeType(name="A", short_form_part=1), ir.AttributeType(name="B", short_form_part=2)],
        )
        assert ctx.writer.stream.getvalue() == "attribute A [1]\n\nattribute B [2]\n\n"


class TestErrorDefinitions:
    def _error(self) -> ir.ErrorDefinition:
        return ir.ErrorDefinition(
            name="DELIVERY_FAILED",
            number=65536,
            comment="Delivery failed",
            extra_information=ir.ElementReference(type=_mal("UInteger"), comment="Index"),
        )

    def test_extra_info_comment_shown(self, service_context: MakeContext) -> None:
        ctx = service_context(DocType.BULK)
        write_error_definitions(ctx, [self._error()])
        assert ctx.writer.stream.getvalue() == (
            "/// Delivery failed\nerror DELIVERY_FAILED [65536]:\n\t/// Index\n\tUInteger\n\n"
        )

    def test_suppressed(self, service_context: MakeContext) -> None:
        ctx = service_context(DocType.SUPPRESS)
        write_error_definitions(ctx, [self._error()])
        assert ctx.writer.stream.getvalue() == "error DELIVERY_FAILED [65536]: UInteger\n\n"

    def test_without_extra_info(self, service_context: MakeContext) -> None:
        ctx = service_context()
        write_error_definitions(ctx, [ir.ErrorDefinition(name="BUSY", number=7)])
        assert ctx.writer.stream.getvalue() == "error BUSY [7]\n\n"
