import json
import logging
from pathlib import Path

import pytest

from lsp_definition_settings import (
    InMemoryDefinitionRegistry,
    InMemorySettingsStore,
    ReconciliationEngine,
    TemplateLoadError,
    load_template,
    load_templates,
)
from lsp_definition_settings.models import (
    file_name_patterns_mapping,
    file_type_mapping,
    language_mapping,
)

TEMPLATES = Path(__file__).resolve().parent / "fixtures" / "templates"


def test_load_template_manifest():
    template = load_template(TEMPLATES / "pylsp")
    assert template.id == "pylsp"
    assert template.name == "Python LSP Server"
    assert template.manifest.command_line == "pylsp"
    assert len(template.manifest.language_mappings) == 1
    assert template.manifest.file_name_pattern_mappings[0].patterns == ["*.py", "*.pyi"]


def test_load_template_keeps_content_as_text():
    template = load_template(TEMPLATES / "pylsp")
    expected = (TEMPLATES / "pylsp" / "settings.json").read_text(encoding="utf-8")
    assert template.configuration_content == expected
    assert json.loads(template.initialization_options_content) == {"completion": {"snippets": True}}


def test_load_template_readme_body_is_description():
    template = load_template(TEMPLATES / "pylsp")
    assert template.description == "Python language server with pycodestyle and rope plugins."


def test_load_template_front_matter_description_wins():
    template = load_template(TEMPLATES / "clangd")
    assert template.description == "C/C++ language server from the LLVM project"


def test_load_template_blank_or_missing_content_defaults():
    template = load_template(TEMPLATES / "clangd")
    assert template.configuration_content == "{}"
    assert template.initialization_options_content == "{}"


def test_load_template_missing_manifest_raises():
    with pytest.raises(TemplateLoadError, match="template.json is required") as exc_info:
        load_template(TEMPLATES / "broken")
    assert exc_info.value.path == TEMPLATES / "broken" / "template.json"


def test_load_template_not_a_directory(tmp_path):
    with pytest.raises(TemplateLoadError, match="not a directory"):
        load_template(tmp_path / "missing")


def test_load_template_invalid_json(tmp_path):
    (tmp_path / "template.json").write_text("{")
    with pytest.raises(TemplateLoadError, match="Invalid JSON"):
        load_template(tmp_path)


def test_load_template_missing_required_field(tmp_path):
    (tmp_path / "template.json").write_text(json.dumps({"id": "x"}))
    with pytest.raises(TemplateLoadError, match="Invalid template"):
        load_template(tmp_path)


def test_load_templates_skips_broken(caplog):
    with caplog.at_level(logging.WARNING, logger="lsp_definition_settings"):
        templates = load_templates(TEMPLATES)
    assert [t.id for t in templates] == ["clangd", "pylsp"]
    assert "broken" in caplog.text


def test_load_templates_missing_root(tmp_path):
    assert load_templates(tmp_path / "nope") == []


def test_template_to_settings_orders_mappings():
    settings = load_template(TEMPLATES / "pylsp").to_settings()
    assert settings.display_name == "Python LSP Server"
    assert settings.command_line == "pylsp"
    assert settings.mappings == [
        language_mapping("Python", "python"),
        file_type_mapping("Python", "python"),
        file_name_patterns_mapping(["*.py", "*.pyi"], "python"),
    ]


def test_definition_from_template_is_not_modified_once_applied():
    template = load_template(TEMPLATES / "pylsp")
    registry = InMemoryDefinitionRegistry()
    registry.register_template(template)
    store = InMemorySettingsStore({template.id: template.to_settings()})
    engine = ReconciliationEngine(InMemorySettingsStore(), store, registry)

    view = engine.reset("pylsp", "user_defined")
    assert engine.is_modified("pylsp", "user_defined", view) is False
    assert view.file_type_mappings == [file_type_mapping("Python", "python")]
