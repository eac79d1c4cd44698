"""
Render context threaded through the MOSDL rendering functions.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ...core import ir
from ...core.config import DocType
from .writer import IndentWriter


@dataclass(frozen=True)
class RenderContext:
    """
    State of one area render.

    The writer (and with it the indent level) is shared by every context
    derived from the same area context; area and service identify the scope
    type references are resolved against.

    Attributes:
        writer: Output writer of the current area
        doc_type: Documentation mode of the render pass
        area: Area being rendered
        service: Service being rendered (None at area level)
    """

    writer: IndentWriter
    doc_type: DocType = DocType.BULK
    area: ir.Area | None = None
    service: ir.Service | None = None

    def with_service(self, service: ir.Service | None) -> RenderContext:
        return replace(self, service=service)

    @property
    def shows_inline_docs(self) -> bool:
        return self.doc_type == DocType.INLINE
