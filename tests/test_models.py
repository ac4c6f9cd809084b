import pytest
from pydantic import TypeAdapter, ValidationError

from lsp_definition_settings.models import (
    DefinitionSettings,
    FileNamePatternsMapping,
    FileTypeMapping,
    LanguageMapping,
    MappingRule,
    StaticDefinitionSettings,
    UserDefinedDefinitionSettings,
    language_mapping,
)

# --- MappingRule ---


def test_mapping_rule_discriminated_by_criterion():
    adapter = TypeAdapter(MappingRule)
    rule = adapter.validate_python({"criterion": "file_type", "fileType": "TEXT", "languageId": "plaintext"})
    assert isinstance(rule, FileTypeMapping)
    assert rule.file_type == "TEXT"
    assert rule.language_id == "plaintext"


def test_mapping_rule_patterns():
    adapter = TypeAdapter(MappingRule)
    rule = adapter.validate_python(
        {"criterion": "file_name_patterns", "fileNamePatterns": ["*.rs"], "languageId": "rust"}
    )
    assert isinstance(rule, FileNamePatternsMapping)
    assert rule.file_name_patterns == ["*.rs"]


def test_mapping_rule_rejects_second_criterion():
    """A language rule cannot also carry a file type."""
    with pytest.raises(ValidationError):
        LanguageMapping.model_validate({"language": "Python", "fileType": "TEXT", "languageId": "python"})


def test_mapping_rule_unknown_criterion():
    with pytest.raises(ValidationError):
        TypeAdapter(MappingRule).validate_python({"criterion": "extension", "languageId": "x"})


def test_mapping_rule_dump_uses_aliases():
    data = language_mapping("Python", "python").model_dump(by_alias=True)
    assert data == {"criterion": "language", "language": "Python", "languageId": "python"}


def test_mapping_rule_value_equality():
    assert language_mapping("Python", "python") == language_mapping("Python", "python")
    assert language_mapping("Python", "python") != language_mapping("Python", "py")


# --- DefinitionSettings ---


def test_static_settings_defaults():
    s = StaticDefinitionSettings()
    assert s.definition_kind == "static"
    assert s.debug_port is None
    assert s.debug_suspend is False
    assert s.server_trace == "off"
    assert s.report_error_kind == "as_notification"


def test_static_settings_rejects_unknown_trace():
    with pytest.raises(ValidationError):
        StaticDefinitionSettings.model_validate({"serverTrace": "loud"})


def test_user_defined_settings_defaults():
    s = UserDefinedDefinitionSettings()
    assert s.definition_kind == "user_defined"
    assert s.command_line == ""
    assert s.mappings == []
    assert s.configuration_content == "{}"
    assert s.initialization_options_content == "{}"


def test_definition_settings_union_picks_variant():
    adapter = TypeAdapter(DefinitionSettings)
    static = adapter.validate_python({"definitionKind": "static", "debugPort": "5005"})
    assert isinstance(static, StaticDefinitionSettings)
    assert static.debug_port == "5005"

    user_defined = adapter.validate_python(
        {
            "definitionKind": "user_defined",
            "displayName": "pyls",
            "commandLine": "pylsp",
            "mappings": [{"criterion": "language", "language": "Python", "languageId": "python"}],
        }
    )
    assert isinstance(user_defined, UserDefinedDefinitionSettings)
    assert user_defined.mappings == [language_mapping("Python", "python")]


def test_user_defined_settings_round_trip_json():
    s = UserDefinedDefinitionSettings(
        display_name="pyls",
        command_line="pylsp",
        mappings=[language_mapping("Python", "python")],
        configuration_content='{"a": 1}',
    )
    loaded = UserDefinedDefinitionSettings.model_validate_json(s.model_dump_json(by_alias=True))
    assert loaded == s
