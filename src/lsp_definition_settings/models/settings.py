"""Persisted settings records for the two kinds of language server definitions."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .mapping import MappingRule  # noqa: TC001

DefinitionKind = Literal["static", "user_defined"]
ServerTrace = Literal["off", "messages", "verbose"]
ErrorReportingKind = Literal["as_notification", "as_error_log", "none"]

DEFINITION_KINDS: tuple[DefinitionKind, ...] = ("static", "user_defined")


class StaticDefinitionSettings(BaseModel):
    """Settings stored for a definition registered statically (by an extension)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    definition_kind: Literal["static"] = Field("static", alias="definitionKind")
    debug_port: str | None = Field(None, alias="debugPort")
    debug_suspend: bool = Field(False, alias="debugSuspend")
    server_trace: ServerTrace = Field("off", alias="serverTrace")
    report_error_kind: ErrorReportingKind = Field("as_notification", alias="reportErrorKind")


class UserDefinedDefinitionSettings(BaseModel):
    """Settings stored for a definition authored entirely by the user.

    The two content fields hold JSON text and are stored as-is.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    definition_kind: Literal["user_defined"] = Field("user_defined", alias="definitionKind")
    display_name: str = Field("", alias="displayName")
    command_line: str = Field("", alias="commandLine")
    mappings: list[MappingRule] = []
    configuration_content: str = Field("{}", alias="configurationContent")
    initialization_options_content: str = Field("{}", alias="initializationOptionsContent")


DefinitionSettings = Annotated[
    StaticDefinitionSettings | UserDefinedDefinitionSettings,
    Field(discriminator="definition_kind"),
]
