from .mapping import (
    CriterionKind,
    FileNamePatternsMapping,
    FileTypeMapping,
    LanguageMapping,
    MappingRule,
    file_name_patterns_mapping,
    file_type_mapping,
    language_mapping,
)
from .settings import (
    DEFINITION_KINDS,
    DefinitionKind,
    DefinitionSettings,
    ErrorReportingKind,
    ServerTrace,
    StaticDefinitionSettings,
    UserDefinedDefinitionSettings,
)
from .template import (
    LanguageServerTemplate,
    TemplateFileNamePatternMapping,
    TemplateFileTypeMapping,
    TemplateLanguageMapping,
    TemplateManifest,
)

__all__ = [
    "DEFINITION_KINDS",
    "CriterionKind",
    "DefinitionKind",
    "DefinitionSettings",
    "ErrorReportingKind",
    "FileNamePatternsMapping",
    "FileTypeMapping",
    "LanguageMapping",
    "LanguageServerTemplate",
    "MappingRule",
    "ServerTrace",
    "StaticDefinitionSettings",
    "TemplateFileNamePatternMapping",
    "TemplateFileTypeMapping",
    "TemplateLanguageMapping",
    "TemplateManifest",
    "UserDefinedDefinitionSettings",
    "file_name_patterns_mapping",
    "file_type_mapping",
    "language_mapping",
]
