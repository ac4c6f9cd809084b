from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from ..models.mapping import (
    FileNamePatternsMapping,
    FileTypeMapping,
    LanguageMapping,
    MappingRule,
)

logger = logging.getLogger(__name__)


@dataclass
class ClassifiedMappings:
    """Mapping rules split by criterion kind, each list in input order."""

    language: list[LanguageMapping] = field(default_factory=list)
    file_type: list[FileTypeMapping] = field(default_factory=list)
    file_name_patterns: list[FileNamePatternsMapping] = field(default_factory=list)

    def __iter__(
        self,
    ) -> Iterator[list[LanguageMapping] | list[FileTypeMapping] | list[FileNamePatternsMapping]]:
        yield self.language
        yield self.file_type
        yield self.file_name_patterns

    def __len__(self) -> int:
        return len(self.language) + len(self.file_type) + len(self.file_name_patterns)


def is_well_formed(rule: MappingRule) -> bool:
    """True if the rule has a language id and its criterion is set."""
    if not rule.language_id:
        return False
    if isinstance(rule, LanguageMapping):
        return bool(rule.language)
    if isinstance(rule, FileTypeMapping):
        return bool(rule.file_type)
    return rule.file_name_patterns is not None


def classify(rules: Iterable[MappingRule]) -> ClassifiedMappings:
    """Partition rules into language, file type and file name pattern lists.

    Rules without a language id or without a criterion value are dropped.
    """
    result = ClassifiedMappings()
    for rule in rules:
        if not is_well_formed(rule):
            logger.warning("Dropping malformed mapping rule: %s", rule.model_dump(by_alias=True))
            continue
        if isinstance(rule, LanguageMapping):
            result.language.append(rule)
        elif isinstance(rule, FileTypeMapping):
            result.file_type.append(rule)
        else:
            result.file_name_patterns.append(rule)
    return result


def merge(
    language: Sequence[LanguageMapping],
    file_type: Sequence[FileTypeMapping],
    file_name_patterns: Sequence[FileNamePatternsMapping],
) -> list[MappingRule]:
    """Concatenate classified rules: language, then file type, then file name patterns."""
    return [*language, *file_type, *file_name_patterns]
