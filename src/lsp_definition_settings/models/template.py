from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .mapping import (
    FileNamePatternsMapping,
    FileTypeMapping,
    LanguageMapping,
    file_name_patterns_mapping,
    file_type_mapping,
    language_mapping,
)
from .settings import UserDefinedDefinitionSettings


class TemplateLanguageMapping(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    language: str
    language_id: str = Field("", alias="languageId")


class TemplateFileTypeMapping(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    file_type: str = Field(alias="fileType")
    language_id: str = Field("", alias="languageId")


class TemplateFileNamePatternMapping(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    patterns: list[str]
    language_id: str = Field("", alias="languageId")


class TemplateManifest(BaseModel):
    """Contents of a template's template.json."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    id: str
    name: str
    command_line: str = Field("", alias="commandLine")
    language_mappings: list[TemplateLanguageMapping] = Field(
        default_factory=list, alias="languageMappings"
    )
    file_type_mappings: list[TemplateFileTypeMapping] = Field(
        default_factory=list, alias="fileTypeMappings"
    )
    file_name_pattern_mappings: list[TemplateFileNamePatternMapping] = Field(
        default_factory=list, alias="fileNamePatternMappings"
    )


class LanguageServerTemplate(BaseModel):
    """A template directory: manifest plus the raw JSON content files beside it."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    manifest: TemplateManifest
    configuration_content: str = "{}"
    initialization_options_content: str = "{}"
    description: str | None = None

    @property
    def id(self) -> str:
        return self.manifest.id

    @property
    def name(self) -> str:
        return self.manifest.name

    def to_settings(self) -> UserDefinedDefinitionSettings:
        """Build the user-defined settings a definition created from this template starts with.

        Mappings are emitted language first, then file type, then file name
        patterns, so a freshly created definition does not read as modified.
        """
        mappings: list[LanguageMapping | FileTypeMapping | FileNamePatternsMapping] = []
        mappings.extend(
            language_mapping(m.language, m.language_id) for m in self.manifest.language_mappings
        )
        mappings.extend(
            file_type_mapping(m.file_type, m.language_id) for m in self.manifest.file_type_mappings
        )
        mappings.extend(
            file_name_patterns_mapping(m.patterns, m.language_id)
            for m in self.manifest.file_name_pattern_mappings
        )
        return UserDefinedDefinitionSettings(
            display_name=self.manifest.name,
            command_line=self.manifest.command_line,
            mappings=mappings,
            configuration_content=self.configuration_content,
            initialization_options_content=self.initialization_options_content,
        )
