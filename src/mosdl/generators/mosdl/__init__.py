"""
MOSDL generator package.

Components:
- writer: tab-indented output
- context: per-area render state
- names: keyword escaping and type name resolution
- docs: comment output (bulk, inline, suppressed)
- operations: interaction pattern layout
- datatypes, errors: type and error definitions
- generator: area/service/capability traversal
"""

from ...core.config import DocType
from .context import RenderContext
from .generator import MosdlGenerator
from .writer import IndentWriter

__all__ = [
    "DocType",
    "IndentWriter",
    "MosdlGenerator",
    "RenderContext",
]
