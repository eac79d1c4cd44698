"""
MOSDL generator.

Renders each area of a specification into its own MOSDL text unit::

    /// Test area
    area test [4711]

    service ServiceName [1] {
        capability [7] {
            request getDefinition [2] (definitionId: Identifier)
                -> (definition: Element)

        }

    }
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TextIO

from ...core import ir
from ...core.config import DocType
from ...core.errors import GeneratorError
from .. import Generator, GeneratorCapabilities
from ..base import GeneratorResult
from .context import RenderContext
from .datatypes import write_data_types
from .docs import write_doc
from .errors import write_error_definitions
from .names import escape_id
from .operations import write_operation
from .writer import IndentWriter

logger = logging.getLogger(__name__)

MOSDL_FILE_SUFFIX = ".mosdl"


class MosdlGenerator(Generator):
    """
    Generate MOSDL files from a service specification.

    Each area is put in its own file named after the area. Rendering is
    all-or-nothing: the first output failure aborts the remaining areas.
    """

    def __init__(self, doc_type: DocType = DocType.BULK, file_suffix: str = MOSDL_FILE_SUFFIX):
        """
        Args:
            doc_type: Kind of documentation to generate
            file_suffix: Suffix of the generated files
        """
        self.doc_type = doc_type
        self.file_suffix = file_suffix

    def get_capabilities(self) -> GeneratorCapabilities:
        return GeneratorCapabilities(
            name="mosdl",
            description="MOSDL text, one file per area",
            output_formats=["mosdl"],
        )

    def output_name(self, area: ir.Area) -> str:
        return f"{area.name}{self.file_suffix}"

    def generate(self, spec: ir.Specification, output_dir: Path) -> GeneratorResult:
        """
        Write one MOSDL file per area into ``output_dir``.

        Raises:
            GeneratorError: If a directory or file cannot be created or written
        """
        logger.debug("Generating MOSDL file(s) into directory '%s'.", output_dir)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GeneratorError(f"Cannot create output directory {output_dir}: {e}") from e

        result = GeneratorResult()
        for area in spec.areas:
            target = output_dir / self.output_name(area)
            logger.debug("Generating MOSDL file '%s'.", target)
            try:
                with target.open("w", encoding="utf-8", newline="\n") as stream:
                    self.write_area(area, stream)
            except (OSError, ValueError) as e:
                raise GeneratorError(f"Failed to write {target}: {e}") from e
            result.add_file(target)
            logger.debug("Generated MOSDL file '%s'.", target)

        logger.debug("Generated all MOSDL files into directory '%s'.", output_dir)
        return result

    def render(self, spec: ir.Specification) -> dict[str, str]:
        """Render every area in memory, keyed by output file name."""
        return {self.output_name(area): self.render_area(area) for area in spec.areas}

    def render_area(self, area: ir.Area) -> str:
        buffer = io.StringIO()
        self.write_area(area, buffer)
        return buffer.getvalue()

    def write_area(self, area: ir.Area, stream: TextIO) -> None:
        """
        Write one area to a text stream.

        Raises:
            GeneratorError: If writing to the stream fails or the stream cannot
                encode the text
        """
        ctx = RenderContext(writer=IndentWriter(stream), doc_type=self.doc_type, area=area)
        try:
            self._write_area(ctx, area)
        except (OSError, ValueError) as e:
            raise GeneratorError(f"Failed to write area '{area.name}': {e}") from e

    def _write_area(self, ctx: RenderContext, area: ir.Area) -> None:
        writer = ctx.writer
        write_doc(ctx, area.comment)
        version = "" if area.version == 1 else f".{area.version}"
        writer.write_line("area ", escape_id(area.name), " [", area.number, version, "]")
        writer.write_line()
        # TODO: write imports once the IR records cross-area dependencies

        for service in area.services:
            self._write_service(ctx.with_service(service), service)

        write_data_types(ctx, area.data_types)
        write_error_definitions(ctx, area.errors)

    def _write_service(self, ctx: RenderContext, service: ir.Service) -> None:
        writer = ctx.writer
        write_doc(ctx, service.comment)
        writer.write_line("service ", escape_id(service.name), " [", service.number, "] {")
        with writer.indented():
            for capability_set in service.capability_sets:
                self._write_capability_set(ctx, capability_set)
            write_data_types(ctx, service.data_types)
            write_error_definitions(ctx, service.errors)
        writer.write_line("}")
        writer.write_line()

    def _write_capability_set(self, ctx: RenderContext, capability_set: ir.CapabilitySet) -> None:
        writer = ctx.writer
        write_doc(ctx, capability_set.comment)
        writer.write_line("capability [", capability_set.number, "] {")
        with writer.indented():
            for operation in capability_set.operations:
                write_operation(ctx, operation)
        writer.write_line("}")
        writer.write_line()
