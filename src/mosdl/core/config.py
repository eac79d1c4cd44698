"""
Generator configuration loaded from ``mosdl.toml``.

Example::

    [generator]
    doc_type = "bulk"
    output_dir = "build/mosdl"
    file_suffix = ".mosdl"
"""

import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ConfigError

CONFIG_FILE_NAME = "mosdl.toml"


class DocType(str, Enum):
    """The kinds of documentation the MOSDL generator can output."""

    # Documentation for operations and everything belonging to them is put in
    # one block at the head of the operation. Recommended.
    BULK = "bulk"
    # Documentation is put right in front of each element. Hard to read for
    # more than a tiny amount of documentation.
    INLINE = "inline"
    # Documentation is stripped completely.
    SUPPRESS = "suppress"


@dataclass
class GeneratorConfig:
    """Settings for a generation run."""

    doc_type: DocType = DocType.BULK
    output_dir: Path = Path(".")
    file_suffix: str = ".mosdl"


def parse_doc_type(value: str) -> DocType:
    """Parse a documentation type name, case-insensitively."""
    try:
        return DocType(value.lower())
    except ValueError:
        choices = ", ".join(d.value for d in DocType)
        raise ConfigError(f"Unknown doc type '{value}'. Expected one of: {choices}") from None


def load_config(path: Path) -> GeneratorConfig:
    """
    Load generator configuration.

    A missing file yields the defaults. Relative output directories are
    resolved against the directory containing the config file.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not path.exists():
        return GeneratorConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    generator_data = data.get("generator", {})

    output_dir = Path(generator_data.get("output_dir", "."))
    if not output_dir.is_absolute():
        output_dir = path.parent / output_dir

    file_suffix = generator_data.get("file_suffix", ".mosdl")
    if not file_suffix.startswith("."):
        raise ConfigError(f"file_suffix must start with '.', got '{file_suffix}'")

    return GeneratorConfig(
        doc_type=parse_doc_type(generator_data.get("doc_type", DocType.BULK.value)),
        output_dir=output_dir,
        file_suffix=file_suffix,
    )
