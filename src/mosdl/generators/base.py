"""
Base result type for generators.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class GeneratorResult:
    """
    Result from a generator execution.

    Attributes:
        files_created: Paths of the files written, in generation order
    """

    files_created: list[Path] = field(default_factory=list)

    def add_file(self, path: Path) -> None:
        """Record a file that was created."""
        self.files_created.append(path)
