"""Load, diff and commit editable definition settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import PersistFailureError
from ..mappings import classify
from ..models.settings import DEFINITION_KINDS
from ._view import StaticSettingsView, UserDefinedSettingsView

if TYPE_CHECKING:
    from ..models.settings import (
        DefinitionKind,
        StaticDefinitionSettings,
        UserDefinedDefinitionSettings,
    )
    from ._protocols import DefinitionRegistry, SettingsStore
    from ._view import ReconciliationView

logger = logging.getLogger(__name__)


def _check_kind(definition_kind: str) -> None:
    if definition_kind not in DEFINITION_KINDS:
        raise ValueError(f"Unknown definition kind: {definition_kind!r}")


def _check_view(definition_id: str, definition_kind: DefinitionKind, view: ReconciliationView) -> None:
    _check_kind(definition_kind)
    if view.definition_kind != definition_kind:
        raise ValueError(
            f"View for {definition_id!r} is {view.definition_kind!r}, expected {definition_kind!r}"
        )
    if view.definition_id and view.definition_id != definition_id:
        raise ValueError(f"View belongs to {view.definition_id!r}, not {definition_id!r}")


class ReconciliationEngine:
    """Keeps editable views in step with the persisted settings of each definition.

    Static definitions persist debug/trace settings in static_store and get
    their mappings from the registry. User-defined definitions persist their
    whole configuration in user_defined_store and mirror it into the registry
    on apply.
    """

    def __init__(
        self,
        static_store: SettingsStore[StaticDefinitionSettings],
        user_defined_store: SettingsStore[UserDefinedDefinitionSettings],
        registry: DefinitionRegistry,
    ) -> None:
        self._static_store = static_store
        self._user_defined_store = user_defined_store
        self._registry = registry

    def reset(self, definition_id: str, definition_kind: DefinitionKind) -> ReconciliationView:
        _check_kind(definition_kind)
        if definition_kind == "static":
            return self._reset_static(definition_id)
        return self._reset_user_defined(definition_id)

    def _reset_static(self, definition_id: str) -> StaticSettingsView:
        view = StaticSettingsView(definition_id=definition_id)
        settings = self._static_store.get(definition_id)
        if settings is not None:
            view.debug_port = settings.debug_port
            view.debug_suspend = settings.debug_suspend
            view.server_trace = settings.server_trace
            view.report_error_kind = settings.report_error_kind
        else:
            logger.debug("No settings stored for %s, using defaults", definition_id)
        classified = classify(self._registry.find_mappings_for_definition(definition_id))
        view.language_mappings = classified.language
        view.file_type_mappings = classified.file_type
        view.file_name_pattern_mappings = classified.file_name_patterns
        return view

    def _reset_user_defined(self, definition_id: str) -> UserDefinedSettingsView:
        settings = self._user_defined_store.get(definition_id)
        if settings is None:
            logger.debug("No settings stored for %s, using defaults", definition_id)
            display_name = self._registry.get_display_name(definition_id)
            return UserDefinedSettingsView(
                definition_id=definition_id,
                display_name=display_name if display_name is not None else definition_id,
            )
        classified = classify(settings.mappings)
        return UserDefinedSettingsView(
            definition_id=definition_id,
            display_name=settings.display_name,
            command_line=settings.command_line,
            configuration_content=settings.configuration_content,
            initialization_options_content=settings.initialization_options_content,
            language_mappings=classified.language,
            file_type_mappings=classified.file_type,
            file_name_pattern_mappings=classified.file_name_patterns,
        )

    def is_modified(
        self,
        definition_id: str,
        definition_kind: DefinitionKind,
        view: ReconciliationView,
    ) -> bool:
        _check_view(definition_id, definition_kind, view)
        if isinstance(view, StaticSettingsView):
            static = self._static_store.get(definition_id)
            if static is None:
                return True
            return not (
                view.debug_port == static.debug_port
                and view.debug_suspend == static.debug_suspend
                and view.server_trace == static.server_trace
                and view.report_error_kind == static.report_error_kind
            )

        user_defined = self._user_defined_store.get(definition_id)
        if user_defined is None:
            return True
        return not (
            view.display_name == user_defined.display_name
            and view.command_line == user_defined.command_line
            and view.configuration_content == user_defined.configuration_content
            and view.initialization_options_content == user_defined.initialization_options_content
            and view.merged_mappings() == user_defined.mappings
        )

    def apply(
        self,
        definition_id: str,
        definition_kind: DefinitionKind,
        view: ReconciliationView,
    ) -> None:
        """Write the view back to its store.

        Raises PersistFailureError if the store write fails; nothing else is
        touched in that case. Content fields are stored without validation.
        """
        _check_view(definition_id, definition_kind, view)
        if isinstance(view, StaticSettingsView):
            self._put(self._static_store, definition_id, view.to_settings())
            logger.debug("Applied static settings for %s", definition_id)
            return

        registered_name = self._registry.get_display_name(definition_id)
        previous = self._user_defined_store.get(definition_id)
        previous_name = previous.display_name if previous is not None else registered_name
        settings = view.to_settings()
        self._put(self._user_defined_store, definition_id, settings)

        if registered_name is None:
            logger.debug("%s is not registered, stored settings only", definition_id)
            return
        # The record is committed; only now mirror it into the live definition
        if previous_name != settings.display_name:
            self._registry.rename_definition(definition_id, settings.display_name)
        self._registry.update_definition(
            definition_id,
            settings.command_line,
            settings.mappings,
            settings.configuration_content,
            settings.initialization_options_content,
        )
        logger.debug("Applied user-defined settings for %s", definition_id)

    @staticmethod
    def _put(
        store: SettingsStore[StaticDefinitionSettings] | SettingsStore[UserDefinedDefinitionSettings],
        definition_id: str,
        settings: StaticDefinitionSettings | UserDefinedDefinitionSettings,
    ) -> None:
        try:
            store.put(definition_id, settings)
        except OSError as e:
            raise PersistFailureError(definition_id, f"Could not persist {definition_id}: {e}") from e
