"""Reconciliation API: reset, is_modified and apply for definition settings."""

from __future__ import annotations

from pathlib import Path

from ..models.settings import StaticDefinitionSettings, UserDefinedDefinitionSettings
from ._adapters import LocalFilesystemSettingsStore
from ._engine import ReconciliationEngine
from ._in_memory import InMemoryDefinitionRegistry, InMemorySettingsStore, RegisteredDefinition
from ._protocols import DefinitionRegistry, SettingsStore
from ._session import ReconciliationSession, SessionState
from ._view import ReconciliationView, StaticSettingsView, UserDefinedSettingsView

SETTINGS_DIR_NAME = ".lsp-definition-settings"


def make_reconciliation_engine(
    settings_dir: Path | None = None,
    project_root: Path | None = None,
    registry: DefinitionRegistry | None = None,
) -> ReconciliationEngine:
    """Build a ReconciliationEngine with local filesystem stores.

    settings_dir: defaults to ~/.lsp-definition-settings; holds user-defined-servers.json
    project_root: if set, static settings live in <project_root>/.lsp-definition-settings/servers.json
        instead of <settings_dir>/servers.json
    registry: defaults to an empty InMemoryDefinitionRegistry
    """
    settings_dir = Path(settings_dir) if settings_dir is not None else Path.home() / SETTINGS_DIR_NAME
    static_dir = Path(project_root) / SETTINGS_DIR_NAME if project_root is not None else settings_dir

    return ReconciliationEngine(
        static_store=LocalFilesystemSettingsStore(
            static_dir / "servers.json", StaticDefinitionSettings
        ),
        user_defined_store=LocalFilesystemSettingsStore(
            settings_dir / "user-defined-servers.json", UserDefinedDefinitionSettings
        ),
        registry=registry if registry is not None else InMemoryDefinitionRegistry(),
    )


__all__ = [
    "DefinitionRegistry",
    "InMemoryDefinitionRegistry",
    "InMemorySettingsStore",
    "LocalFilesystemSettingsStore",
    "ReconciliationEngine",
    "ReconciliationSession",
    "ReconciliationView",
    "RegisteredDefinition",
    "SessionState",
    "SettingsStore",
    "StaticSettingsView",
    "UserDefinedSettingsView",
    "make_reconciliation_engine",
]
