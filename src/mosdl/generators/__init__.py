"""
Generator plugin system for MOSDL.

Generators render a specification tree into concrete artifacts.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..core import ir
from ..core.errors import GeneratorError
from .base import GeneratorResult


@dataclass
class GeneratorCapabilities:
    """
    Describes what a generator produces.

    Used for introspection and CLI help text.
    """

    name: str
    description: str
    output_formats: list[str]  # e.g., ["mosdl"]


class Generator(ABC):
    """
    Abstract base class for all generators.

    A generator transforms a specification into output files in a target
    directory.
    """

    @abstractmethod
    def generate(self, spec: ir.Specification, output_dir: Path) -> GeneratorResult:
        """
        Generate artifacts from a specification.

        Args:
            spec: Specification to render
            output_dir: Directory to write generated files (created if needed)

        Returns:
            GeneratorResult listing the files written

        Raises:
            GeneratorError: If generation fails
        """
        pass

    def get_capabilities(self) -> GeneratorCapabilities:
        """
        Get generator capabilities for introspection.

        Override to provide generator metadata.
        """
        return GeneratorCapabilities(
            name=self.__class__.__name__,
            description="No description provided",
            output_formats=["unknown"],
        )


class GeneratorRegistry:
    """
    Registry for generator plugins, looked up by name.
    """

    def __init__(self) -> None:
        self._generators: dict[str, type[Generator]] = {}

    def register(self, name: str, generator_class: type[Generator]) -> None:
        """
        Register a generator class.

        Args:
            name: Generator name (used in CLI: --generator <name>)
            generator_class: Generator class (must extend Generator)

        Raises:
            GeneratorError: If name already registered or class invalid
        """
        if name in self._generators:
            raise GeneratorError(
                f"Generator '{name}' is already registered. Cannot register {generator_class.__name__}."
            )

        if not issubclass(generator_class, Generator):
            raise GeneratorError(f"Generator class {generator_class.__name__} must extend Generator")

        self._generators[name] = generator_class

    def get(self, name: str, **options: Any) -> Generator:
        """
        Get a generator instance by name.

        Args:
            name: Generator name
            **options: Keyword arguments for the generator constructor

        Raises:
            GeneratorError: If generator not found
        """
        if name not in self._generators:
            available = list(self._generators.keys())
            raise GeneratorError(f"Generator '{name}' not found. Available generators: {available}")

        generator_class = self._generators[name]
        return generator_class(**options)

    def list_generators(self) -> list[str]:
        """List all registered generator names."""
        return list(self._generators.keys())


_registry: GeneratorRegistry | None = None


def get_registry() -> GeneratorRegistry:
    """Get the process-wide registry with the built-in generators registered."""
    global _registry
    if _registry is None:
        from .mosdl import MosdlGenerator

        _registry = GeneratorRegistry()
        _registry.register("mosdl", MosdlGenerator)
    return _registry


__all__ = [
    "Generator",
    "GeneratorCapabilities",
    "GeneratorError",
    "GeneratorRegistry",
    "GeneratorResult",
    "get_registry",
]
