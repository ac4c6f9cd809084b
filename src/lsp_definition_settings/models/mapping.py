from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

CriterionKind = Literal["language", "file_type", "file_name_patterns"]


class LanguageMapping(BaseModel):
    """Binds a language key (e.g. "Python") to an LSP language id."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    criterion: Literal["language"] = "language"
    language: str = ""
    language_id: str = Field("", alias="languageId")


class FileTypeMapping(BaseModel):
    """Binds a file type key (e.g. "TEXT") to an LSP language id."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    criterion: Literal["file_type"] = "file_type"
    file_type: str = Field("", alias="fileType")
    language_id: str = Field("", alias="languageId")


class FileNamePatternsMapping(BaseModel):
    """Binds file name globs (e.g. ["*.py", "*.pyi"]) to an LSP language id."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    criterion: Literal["file_name_patterns"] = "file_name_patterns"
    file_name_patterns: list[str] | None = Field(None, alias="fileNamePatterns")
    language_id: str = Field("", alias="languageId")


# Discriminated on "criterion": a rule never carries two criteria
MappingRule = Annotated[
    LanguageMapping | FileTypeMapping | FileNamePatternsMapping,
    Field(discriminator="criterion"),
]


def language_mapping(language: str, language_id: str) -> LanguageMapping:
    return LanguageMapping(language=language, language_id=language_id)


def file_type_mapping(file_type: str, language_id: str) -> FileTypeMapping:
    return FileTypeMapping(file_type=file_type, language_id=language_id)


def file_name_patterns_mapping(patterns: list[str], language_id: str) -> FileNamePatternsMapping:
    return FileNamePatternsMapping(file_name_patterns=list(patterns), language_id=language_id)
