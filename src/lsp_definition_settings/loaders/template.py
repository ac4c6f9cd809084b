from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import frontmatter  # type: ignore[import-untyped]
from pydantic import ValidationError

from ..errors import TemplateLoadError
from ..models.template import LanguageServerTemplate, TemplateManifest

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

TEMPLATE_FILE_NAME = "template.json"
SETTINGS_FILE_NAME = "settings.json"
INITIALIZATION_OPTIONS_FILE_NAME = "initializationOptions.json"
README_FILE_NAME = "README.md"


def load_template(path: Path) -> LanguageServerTemplate:
    """Load a language server template from its directory.

    template.json is required. settings.json and initializationOptions.json are
    kept as raw text ("{}" when missing or blank). README.md may carry YAML
    front matter; its body is the description unless the front matter sets one.
    """
    if not path.is_dir():
        raise TemplateLoadError(f"Template path is not a directory: {path}", path=path)

    manifest_path = path / TEMPLATE_FILE_NAME
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise TemplateLoadError(f"{TEMPLATE_FILE_NAME} is required: {manifest_path}", path=manifest_path) from e
    except json.JSONDecodeError as e:
        raise TemplateLoadError(f"Invalid JSON in {manifest_path}: {e}", path=manifest_path) from e
    try:
        manifest = TemplateManifest.model_validate(data)
    except ValidationError as e:
        raise TemplateLoadError(f"Invalid template in {manifest_path}: {e}", path=manifest_path) from e

    return LanguageServerTemplate(
        manifest=manifest,
        configuration_content=_read_content(path / SETTINGS_FILE_NAME),
        initialization_options_content=_read_content(path / INITIALIZATION_OPTIONS_FILE_NAME),
        description=_read_description(path / README_FILE_NAME),
    )


def load_templates(root: Path) -> list[LanguageServerTemplate]:
    """Load every template directory directly under root, skipping broken ones."""
    if not root.is_dir():
        logger.warning("No template root found at %s", root)
        return []
    templates: list[LanguageServerTemplate] = []
    for template_dir in sorted(root.iterdir()):
        if not template_dir.is_dir():
            continue
        try:
            templates.append(load_template(template_dir))
        except TemplateLoadError as e:
            logger.warning("Skipping template %s: %s", template_dir, e)
    return templates


# --- internal helpers ---


def _read_content(path: Path) -> str:
    if not path.is_file():
        return "{}"
    text = path.read_text(encoding="utf-8")
    return text if text.strip() else "{}"


def _read_description(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        post = frontmatter.load(str(path))
    except Exception as e:
        raise TemplateLoadError(f"Failed to parse {path}: {e}", path=path) from e
    description = post.metadata.get("description")
    if isinstance(description, str) and description.strip():
        return description.strip()
    body = post.content.strip()
    return body or None
