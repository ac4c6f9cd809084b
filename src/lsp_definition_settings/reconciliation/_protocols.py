"""Protocols (ports) for the reconciliation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from ..models.mapping import MappingRule

SettingsT = TypeVar("SettingsT")


class SettingsStore(Protocol[SettingsT]):
    """Key-value store of one settings variant, keyed by definition id.

    get() returns None when nothing was stored; put() replaces the whole record
    and raises PersistFailureError if the write fails.
    """

    def get(self, definition_id: str) -> SettingsT | None: ...
    def put(self, definition_id: str, settings: SettingsT) -> None: ...


class DefinitionRegistry(Protocol):
    """The set of known language server definitions."""

    def find_mappings_for_definition(self, definition_id: str) -> list[MappingRule]: ...
    def get_display_name(self, definition_id: str) -> str | None: ...
    def rename_definition(self, definition_id: str, new_display_name: str) -> None: ...
    def update_definition(
        self,
        definition_id: str,
        command_line: str,
        mappings: list[MappingRule],
        configuration_content: str,
        initialization_options_content: str,
    ) -> None: ...
