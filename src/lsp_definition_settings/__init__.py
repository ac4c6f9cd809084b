"""Keep editable language server definition settings in step with what is persisted."""

from .errors import (
    ConfigurationError,
    DefinitionNotFoundError,
    PersistFailureError,
    TemplateLoadError,
)
from .loaders import load_template, load_templates
from .mappings import ClassifiedMappings, classify, merge
from .models import (
    DefinitionKind,
    DefinitionSettings,
    FileNamePatternsMapping,
    FileTypeMapping,
    LanguageMapping,
    LanguageServerTemplate,
    MappingRule,
    StaticDefinitionSettings,
    UserDefinedDefinitionSettings,
    file_name_patterns_mapping,
    file_type_mapping,
    language_mapping,
)
from .reconciliation import (
    DefinitionRegistry,
    InMemoryDefinitionRegistry,
    InMemorySettingsStore,
    LocalFilesystemSettingsStore,
    ReconciliationEngine,
    ReconciliationSession,
    ReconciliationView,
    SettingsStore,
    StaticSettingsView,
    UserDefinedSettingsView,
    make_reconciliation_engine,
)
from .validation import ValidationIssue, ValidationResult, validate_settings

__all__ = [
    "ClassifiedMappings",
    "ConfigurationError",
    "DefinitionKind",
    "DefinitionNotFoundError",
    "DefinitionRegistry",
    "DefinitionSettings",
    "FileNamePatternsMapping",
    "FileTypeMapping",
    "InMemoryDefinitionRegistry",
    "InMemorySettingsStore",
    "LanguageMapping",
    "LanguageServerTemplate",
    "LocalFilesystemSettingsStore",
    "MappingRule",
    "PersistFailureError",
    "ReconciliationEngine",
    "ReconciliationSession",
    "ReconciliationView",
    "SettingsStore",
    "StaticDefinitionSettings",
    "StaticSettingsView",
    "TemplateLoadError",
    "UserDefinedDefinitionSettings",
    "UserDefinedSettingsView",
    "ValidationIssue",
    "ValidationResult",
    "classify",
    "file_name_patterns_mapping",
    "file_type_mapping",
    "language_mapping",
    "load_template",
    "load_templates",
    "make_reconciliation_engine",
    "merge",
    "validate_settings",
]
