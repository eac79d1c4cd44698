"""
MOSDL - text rendering of MAL service specifications.

Renders a service specification tree (areas, services, capability sets,
operations, data types and errors) into the compact MOSDL notation.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.config import DocType, GeneratorConfig, load_config
from .core.errors import ConfigError, GeneratorError, LoadError, MosdlError
from .core.loader import load_specification, load_specification_text
from .generators.mosdl import MosdlGenerator

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "DocType",
    "GeneratorConfig",
    "load_config",
    "load_specification",
    "load_specification_text",
    "MosdlGenerator",
    "MosdlError",
    "LoadError",
    "ConfigError",
    "GeneratorError",
]
