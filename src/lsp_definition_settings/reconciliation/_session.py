from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from ..models.settings import DefinitionKind
    from ._engine import ReconciliationEngine
    from ._view import ReconciliationView

SessionState = Literal["loaded", "dirty"]


class ReconciliationSession:
    """One open editing context for a single definition.

    The session owns its view; callers edit session.view in place and then
    apply() or discard(). A definition with nothing persisted yet is dirty
    from the start.
    """

    def __init__(
        self,
        engine: ReconciliationEngine,
        definition_id: str,
        definition_kind: DefinitionKind,
        view: ReconciliationView,
    ) -> None:
        self._engine = engine
        self.definition_id = definition_id
        self.definition_kind = definition_kind
        self.view = view

    @classmethod
    def open(
        cls,
        engine: ReconciliationEngine,
        definition_id: str,
        definition_kind: DefinitionKind,
    ) -> ReconciliationSession:
        return cls(engine, definition_id, definition_kind, engine.reset(definition_id, definition_kind))

    @property
    def state(self) -> SessionState:
        return "dirty" if self.is_modified() else "loaded"

    def is_modified(self) -> bool:
        return self._engine.is_modified(self.definition_id, self.definition_kind, self.view)

    def apply(self) -> None:
        self._engine.apply(self.definition_id, self.definition_kind, self.view)

    def discard(self) -> None:
        self.view = self._engine.reset(self.definition_id, self.definition_kind)
