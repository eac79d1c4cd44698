"""Canonical specification loader.

Reads a specification document (JSON or YAML) and validates it into the
read-only IR tree. All code that needs a ``Specification`` from disk should
import from here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mosdl.core.errors import LoadError
from mosdl.core.ir import Specification

logger = logging.getLogger(__name__)

_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def load_specification_text(text: str, fmt: str = "json", source: str = "<string>") -> Specification:
    """Parse and validate a specification document held in memory.

    Args:
        text: Document content.
        fmt: ``"json"`` or ``"yaml"``.
        source: Label used in error messages.

    Raises:
        LoadError: If the document cannot be parsed or does not match the model.
    """
    data: Any
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in {source}: {e}") from e
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise LoadError(f"Invalid YAML in {source}: {e}") from e
    else:
        raise LoadError(f"Unsupported format: {fmt}. Use 'json' or 'yaml'.")

    if not isinstance(data, dict):
        raise LoadError(f"Specification in {source} must be a mapping with an 'areas' list")

    try:
        spec = Specification.model_validate(data)
    except ValidationError as e:
        raise LoadError(f"Invalid specification in {source}:\n{e}") from e

    logger.debug("Loaded %d area(s) from %s", len(spec.areas), source)
    return spec


def load_specification(path: Path) -> Specification:
    """Load a specification from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        LoadError: If the file is missing, has an unknown suffix or is invalid.
    """
    fmt = _FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise LoadError(f"Cannot load {path}: expected a .json, .yaml or .yml file")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}") from e

    return load_specification_text(text, fmt, source=str(path))
