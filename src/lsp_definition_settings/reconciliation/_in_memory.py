"""In-memory store and registry (no disk I/O)."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel

from ..errors import DefinitionNotFoundError

if TYPE_CHECKING:
    from ..models.mapping import MappingRule
    from ..models.settings import UserDefinedDefinitionSettings
    from ..models.template import LanguageServerTemplate

logger = logging.getLogger(__name__)

_S = TypeVar("_S", bound=BaseModel)


class InMemorySettingsStore(Generic[_S]):
    """Dict-backed settings store. Records are copied in and out."""

    def __init__(self, records: dict[str, _S] | None = None) -> None:
        self._lock = threading.Lock()
        self._records: dict[str, _S] = {
            k: v.model_copy(deep=True) for k, v in (records or {}).items()
        }

    def get(self, definition_id: str) -> _S | None:
        with self._lock:
            record = self._records.get(definition_id)
            return record.model_copy(deep=True) if record is not None else None

    def put(self, definition_id: str, settings: _S) -> None:
        record = settings.model_copy(deep=True)
        with self._lock:
            self._records[definition_id] = record


@dataclass
class RegisteredDefinition:
    """A definition as the registry knows it."""

    id: str
    display_name: str
    user_defined: bool = False
    command_line: str = ""
    mappings: list[MappingRule] = field(default_factory=list)
    configuration_content: str = "{}"
    initialization_options_content: str = "{}"


class InMemoryDefinitionRegistry:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._definitions: dict[str, RegisteredDefinition] = {}

    def register_static(
        self,
        definition_id: str,
        display_name: str,
        mappings: list[MappingRule] | None = None,
    ) -> RegisteredDefinition:
        definition = RegisteredDefinition(
            id=definition_id,
            display_name=display_name,
            mappings=list(mappings or []),
        )
        with self._lock:
            self._definitions[definition_id] = definition
        return definition

    def register_user_defined(
        self, definition_id: str, settings: UserDefinedDefinitionSettings
    ) -> RegisteredDefinition:
        definition = RegisteredDefinition(
            id=definition_id,
            display_name=settings.display_name,
            user_defined=True,
            command_line=settings.command_line,
            mappings=[m.model_copy(deep=True) for m in settings.mappings],
            configuration_content=settings.configuration_content,
            initialization_options_content=settings.initialization_options_content,
        )
        with self._lock:
            self._definitions[definition_id] = definition
        return definition

    def register_template(self, template: LanguageServerTemplate) -> RegisteredDefinition:
        """Create a user-defined definition from a loaded template, keyed by the template id."""
        return self.register_user_defined(template.id, template.to_settings())

    def get(self, definition_id: str) -> RegisteredDefinition | None:
        with self._lock:
            return self._definitions.get(definition_id)

    def find_mappings_for_definition(self, definition_id: str) -> list[MappingRule]:
        with self._lock:
            definition = self._definitions.get(definition_id)
            if definition is None:
                return []
            return [m.model_copy(deep=True) for m in definition.mappings]

    def get_display_name(self, definition_id: str) -> str | None:
        with self._lock:
            definition = self._definitions.get(definition_id)
            return definition.display_name if definition is not None else None

    def rename_definition(self, definition_id: str, new_display_name: str) -> None:
        with self._lock:
            definition = self._definitions.get(definition_id)
            if definition is None:
                raise DefinitionNotFoundError(definition_id)
            logger.info(
                "Renaming language server %s: %r -> %r",
                definition_id,
                definition.display_name,
                new_display_name,
            )
            definition.display_name = new_display_name

    def update_definition(
        self,
        definition_id: str,
        command_line: str,
        mappings: list[MappingRule],
        configuration_content: str,
        initialization_options_content: str,
    ) -> None:
        with self._lock:
            definition = self._definitions.get(definition_id)
            if definition is None:
                raise DefinitionNotFoundError(definition_id)
            definition.command_line = command_line
            definition.mappings = [m.model_copy(deep=True) for m in mappings]
            definition.configuration_content = configuration_content
            definition.initialization_options_content = initialization_options_content
