"""Tests for the specification loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from mosdl.core import ir
from mosdl.core.errors import LoadError
from mosdl.core.loader import load_specification, load_specification_text
from mosdl.generators.mosdl import MosdlGenerator


@pytest.fixture
def specs_dir(fixtures_dir: Path) -> Path:
    return fixtures_dir / "specs"


class TestLoadSpecification:
    def test_yaml(self, specs_dir: Path, scenario_spec: ir.Specification) -> None:
        assert load_specification(specs_dir / "scenario.yaml") == scenario_spec

    def test_json_renders(self, specs_dir: Path) -> None:
        spec = load_specification(specs_dir / "com.json")
        assert MosdlGenerator().render(spec)["COM.mosdl"] == (
            "/// Common object model\n"
            "area COM [2]\n"
            "\n"
            "service Event [1] {\n"
            "\tcapability [1] {\n"
            "\t\tpubsub monitorEvent [1] <- (objectType: COM::ObjectType, "
            "eventDetails: List?<COM::ObjectDetails>)\n"
            "\n"
            "\t}\n"
            "\n"
            "\terror INVALID [70000]: UInteger\n"
            "\n"
            "}\n"
            "\n"
            "composite ObjectType [1] {\n"
            '\t"area": UShort\n'
            "}\n"
            "\n"
            "composite ObjectDetails [2] {\n"
            "}\n"
            "\n"
        )

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError, match="Cannot read"):
            load_specification(tmp_path / "missing.json")

    def test_unknown_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "spec.xml"
        path.write_text("<specification/>")
        with pytest.raises(LoadError, match="expected a .json, .yaml or .yml file"):
            load_specification(path)


class TestLoadSpecificationText:
    def test_invalid_json(self) -> None:
        with pytest.raises(LoadError, match="Invalid JSON"):
            load_specification_text("{", "json")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(LoadError, match="Invalid YAML"):
            load_specification_text("areas: [", "yaml")

    def test_not_a_mapping(self) -> None:
        with pytest.raises(LoadError, match="must be a mapping"):
            load_specification_text("[]", "json")

    def test_model_violation(self) -> None:
        text = '{"areas": [{"name": "a", "number": 1, "services": [{"name": "s", "number": 1, ' \
            '"capabilitySets": [{"operations": [{"name": "o", "number": 1, "interaction": "invoke", ' \
            '"messages": [{}]}]}]}]}]}'
        with pytest.raises(LoadError, match="needs 3 message"):
            load_specification_text(text, "json")

    def test_progress_renders_repeat_marker(self) -> None:
        text = (
            "areas:\n"
            "  - name: a\n"
            "    number: 1\n"
            "    services:\n"
            "      - name: s\n"
            "        number: 1\n"
            "        capabilitySets:\n"
            "          - number: 1\n"
            "            operations:\n"
            "              - {name: p, number: 1, interaction: progress, messages: [{}, {}, {}, {}]}\n"
        )
        area = load_specification_text(text, "yaml").areas[0]
        assert "\t\t\t-> ()*\n\t\t\t-> ()\n" in MosdlGenerator().render_area(area)

    def test_mismatched_stages(self) -> None:
        text = (
            '{"areas": [{"name": "a", "number": 1, "services": [{"name": "s", "number": 1, '
            '"capabilitySets": [{"operations": [{"name": "p", "number": 1, "interaction": "progress", '
            '"messages": [{"stage": "progress"}, {"stage": "progress"}, '
            '{"stage": "progress"}, {"stage": "progress"}]}]}]}]}]}'
        )
        with pytest.raises(LoadError, match="expects stages"):
            load_specification_text(text, "json")

    def test_unsupported_format(self) -> None:
        with pytest.raises(LoadError, match="Unsupported format"):
            load_specification_text("", "xml")

    def test_empty_document(self) -> None:
        assert load_specification_text("{}", "json").areas == []
