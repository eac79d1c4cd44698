"""Shared pytest fixtures for MOSDL tests."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from mosdl.core import ir
from mosdl.core.config import DocType
from mosdl.generators.mosdl import IndentWriter, RenderContext
from mosdl.generators.mosdl.operations import write_operation


def _mal(name: str, is_list: bool = False) -> ir.TypeReference:
    """Reference to a MAL built-in type."""
    return ir.TypeReference(area="MAL", name=name, is_list=is_list)


def _field(name: str, type_name: str = "Identifier", **kwargs) -> ir.FieldSpec:
    return ir.FieldSpec(name=name, type=_mal(type_name, kwargs.pop("is_list", False)), **kwargs)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def scenario_area() -> ir.Area:
    """Area 'test' with a definition service spread over two capability sets."""
    return ir.Area(
        name="test",
        number=4711,
        services=[
            ir.Service(
                name="ServiceName",
                number=1,
                capability_sets=[
                    ir.CapabilitySet(
                        number=7,
                        operations=[
                            ir.Operation(
                                name="listDefinitions",
                                number=1,
                                interaction=ir.InteractionType.REQUEST,
                                messages=[
                                    ir.Message(stage=ir.InteractionStage.REQUEST),
                                    ir.Message(
                                        stage=ir.InteractionStage.REQUEST_RESPONSE,
                                        fields=[_field("definitionIds", is_list=True)],
                                    ),
                                ],
                            ),
                            ir.Operation(
                                name="getDefinition",
                                number=2,
                                interaction=ir.InteractionType.REQUEST,
                                messages=[
                                    ir.Message(
                                        stage=ir.InteractionStage.REQUEST,
                                        fields=[_field("definitionId")],
                                    ),
                                    ir.Message(
                                        stage=ir.InteractionStage.REQUEST_RESPONSE,
                                        fields=[_field("definition", "Element")],
                                    ),
                                ],
                            ),
                        ],
                    ),
                    ir.CapabilitySet(
                        operations=[
                            ir.Operation(
                                name="addDefinition",
                                number=3,
                                interaction=ir.InteractionType.SUBMIT,
                                messages=[
                                    ir.Message(
                                        stage=ir.InteractionStage.SUBMIT,
                                        fields=[
                                            _field("definitionId"),
                                            _field("newDefinition", "Element"),
                                        ],
                                    ),
                                ],
                            ),
                        ],
                    ),
                ],
            )
        ],
    )


@pytest.fixture
def scenario_spec(scenario_area: ir.Area) -> ir.Specification:
    return ir.Specification(areas=[scenario_area])


@pytest.fixture
def service_context() -> Callable[[DocType], RenderContext]:
    """Factory for a context rendering service 'Svc' of area 'test' into a buffer."""

    def make(doc_type: DocType = DocType.BULK) -> RenderContext:
        service = ir.Service(name="Svc", number=1)
        area = ir.Area(name="test", number=1, services=[service])
        return RenderContext(
            writer=IndentWriter(io.StringIO()),
            doc_type=doc_type,
            area=area,
            service=service,
        )

    return make


@pytest.fixture
def render_operation(
    service_context: Callable[[DocType], RenderContext],
) -> Callable[..., str]:
    """Render a single operation at indent level 0 and return the text."""

    def render(operation: ir.Operation, doc_type: DocType = DocType.BULK) -> str:
        ctx = service_context(doc_type)
        write_operation(ctx, operation)
        return ctx.writer.stream.getvalue()

    return render
