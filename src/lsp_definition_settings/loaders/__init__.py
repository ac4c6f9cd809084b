from .template import load_template, load_templates

__all__ = [
    "load_template",
    "load_templates",
]
