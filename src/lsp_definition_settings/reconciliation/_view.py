from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal

from ..mappings import merge
from ..models.settings import StaticDefinitionSettings, UserDefinedDefinitionSettings

if TYPE_CHECKING:
    from ..models.mapping import (
        FileNamePatternsMapping,
        FileTypeMapping,
        LanguageMapping,
        MappingRule,
    )
    from ..models.settings import ErrorReportingKind, ServerTrace


@dataclass
class _MappingsView:
    language_mappings: list[LanguageMapping] = field(default_factory=list)
    file_type_mappings: list[FileTypeMapping] = field(default_factory=list)
    file_name_pattern_mappings: list[FileNamePatternsMapping] = field(default_factory=list)

    def merged_mappings(self) -> list[MappingRule]:
        return merge(
            self.language_mappings,
            self.file_type_mappings,
            self.file_name_pattern_mappings,
        )


@dataclass
class StaticSettingsView(_MappingsView):
    """Editable settings of a statically registered definition.

    The mapping lists come from the registry and are never written back.
    """

    definition_id: str = ""
    debug_port: str | None = ""
    debug_suspend: bool = False
    server_trace: ServerTrace = "off"
    report_error_kind: ErrorReportingKind = "as_notification"
    definition_kind: Literal["static"] = "static"

    def to_settings(self) -> StaticDefinitionSettings:
        return StaticDefinitionSettings(
            debug_port=self.debug_port,
            debug_suspend=self.debug_suspend,
            server_trace=self.server_trace,
            report_error_kind=self.report_error_kind,
        )


@dataclass
class UserDefinedSettingsView(_MappingsView):
    """Editable settings of a user-defined definition."""

    definition_id: str = ""
    display_name: str = ""
    command_line: str = ""
    configuration_content: str = "{}"
    initialization_options_content: str = "{}"
    definition_kind: Literal["user_defined"] = "user_defined"

    def to_settings(self) -> UserDefinedDefinitionSettings:
        return UserDefinedDefinitionSettings(
            display_name=self.display_name,
            command_line=self.command_line,
            mappings=self.merged_mappings(),
            configuration_content=self.configuration_content,
            initialization_options_content=self.initialization_options_content,
        )


ReconciliationView = StaticSettingsView | UserDefinedSettingsView
