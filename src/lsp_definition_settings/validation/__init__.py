from __future__ import annotations

from ..models.settings import StaticDefinitionSettings, UserDefinedDefinitionSettings
from ._result import ValidationIssue, ValidationResult
from ._settings import validate_static_settings as _validate_static_settings
from ._settings import validate_user_defined_settings as _validate_user_defined_settings


def validate_settings(
    settings: StaticDefinitionSettings | UserDefinedDefinitionSettings,
) -> ValidationResult:
    """Report problems in a settings record without rejecting it.

    User-defined: JSON content fields must parse to objects, mappings the
    classifier would drop are reported, an empty command line is flagged.
    Static: the debug port must be a valid port number.
    """
    if isinstance(settings, StaticDefinitionSettings):
        return _validate_static_settings(settings)
    return _validate_user_defined_settings(settings)


__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "validate_settings",
]
