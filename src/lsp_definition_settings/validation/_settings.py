from __future__ import annotations

import json

from ..mappings import is_well_formed
from ..models.settings import StaticDefinitionSettings, UserDefinedDefinitionSettings
from ._result import ValidationResult

_CONTENT_FIELDS = (
    ("configurationContent", "configuration_content"),
    ("initializationOptionsContent", "initialization_options_content"),
)


def validate_user_defined_settings(settings: UserDefinedDefinitionSettings) -> ValidationResult:
    result = ValidationResult()

    if not settings.display_name.strip():
        result.add("error", "displayName", "displayName: Required")
    if not settings.command_line.strip():
        result.add("warning", "commandLine", "Command line is empty, the server cannot be started")

    for alias, attr in _CONTENT_FIELDS:
        content = getattr(settings, attr)
        if not content.strip():
            continue
        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            result.add("error", alias, f"{alias}: Invalid JSON ({e.msg} at line {e.lineno})")
            continue
        if not isinstance(parsed, dict):
            result.add("error", alias, f"{alias}: Expected a JSON object")

    for i, rule in enumerate(settings.mappings):
        if is_well_formed(rule):
            continue
        if not rule.language_id:
            message = "Mapping has no language id and will be ignored"
        else:
            message = f"Mapping has no {rule.criterion.replace('_', ' ')} and will be ignored"
        result.add("warning", f"mappings[{i}]", message)

    return result


def validate_static_settings(settings: StaticDefinitionSettings) -> ValidationResult:
    result = ValidationResult()
    port = settings.debug_port
    if port:
        if not port.isdecimal() or not 0 < int(port) < 65536:
            result.add("error", "debugPort", f'debugPort: "{port}" is not a valid port number')
    elif settings.debug_suspend:
        result.add("warning", "debugSuspend", "debugSuspend has no effect without a debugPort")
    return result
