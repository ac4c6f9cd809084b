"""Splitting mapping rules by criterion kind and joining them back."""

from ._classifier import ClassifiedMappings, classify, is_well_formed, merge

__all__ = [
    "ClassifiedMappings",
    "classify",
    "is_well_formed",
    "merge",
]
