"""Ingredient type classification and bulk-buy suggestions."""
import re

from bulkbasket.utilities.constants import (
    BULK_RECOMMENDATIONS,
    DEFAULT_INGREDIENT_TYPE,
    DEPARTMENT_BY_TYPE,
    INGREDIENT_TYPE_PATTERNS,
)

_TYPE_PATTERNS = [(kind, re.compile(pattern)) for kind, pattern in INGREDIENT_TYPE_PATTERNS]


def classify_ingredient_type(name: str) -> str:
    """Return protein/produce/dairy/pantry/other by substring match on the name."""
    lowered = (name or '').lower()
    for kind, pattern in _TYPE_PATTERNS:
        if pattern.search(lowered):
            return kind
    return DEFAULT_INGREDIENT_TYPE


def department_for(name: str) -> str:
    return DEPARTMENT_BY_TYPE[classify_ingredient_type(name)]


def bulk_recommendation(name: str, usage_count: int) -> str:
    if usage_count >= 5:
        return BULK_RECOMMENDATIONS[classify_ingredient_type(name)]
    if usage_count >= 3:
        return 'Buy medium/bulk size'
    if usage_count >= 2:
        return 'Buy regular size'
    return ''


__all__ = ['classify_ingredient_type', 'department_for', 'bulk_recommendation']
