from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(Exception):
    """Base class for failures while committing definition settings."""


class PersistFailureError(ConfigurationError):
    """Raised when a settings store could not write a record.

    The previously persisted record, if any, is still the visible one.

    Attributes:
        definition_id: The definition whose settings could not be written.
    """

    def __init__(self, definition_id: str, message: str | None = None) -> None:
        self.definition_id = definition_id
        super().__init__(message or f"Could not persist settings for definition: {definition_id}")


class DefinitionNotFoundError(Exception):
    """Raised when a registry operation targets a definition it does not know."""

    def __init__(self, definition_id: str) -> None:
        self.definition_id = definition_id
        super().__init__(f"Language server definition not found: {definition_id}")


class TemplateLoadError(Exception):
    """Raised when a language server template directory cannot be loaded.

    Attributes:
        path: The template directory or file that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
