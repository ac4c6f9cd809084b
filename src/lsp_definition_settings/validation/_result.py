from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

IssueLevel = Literal["error", "warning"]


@dataclass
class ValidationIssue:
    """One problem found in a settings record."""

    level: IssueLevel
    path: str  # persisted field name, e.g. "configurationContent" or "mappings[2]"
    message: str


@dataclass
class ValidationResult:
    """Problems found in a settings record.

    Nothing here blocks apply(); errors mark content a language server
    launch will most likely reject.
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    def add(self, level: IssueLevel, path: str, message: str) -> None:
        self.issues.append(ValidationIssue(level, path, message))

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]
