"""Ingredient name normalization.

Turns free-text ingredient lines ("2 cups fresh chopped spinach") into the
canonical key used for counting and price matching ("spinach").
"""
import re

from bulkbasket.utilities.constants import DESCRIPTOR_WORDS, MEASURE_WORDS, UNICODE_FRACTIONS

_DESCRIPTOR_RE = re.compile(r'\b(' + '|'.join(DESCRIPTOR_WORDS) + r')\b')
_PARENTHETICAL_RE = re.compile(r'\([^)]*\)')
_TO_TASTE_RE = re.compile(r'\s+to\s+taste$')
_WHITESPACE_RE = re.compile(r'\s+')
_NUMBER = rf'(?:\d+(?:[./]\d+)?[{UNICODE_FRACTIONS}]?|[{UNICODE_FRACTIONS}])'
# 2, 1/2, 1.5, ½, 1½, 1-2, 200g
_QUANTITY_RE = re.compile(rf'^{_NUMBER}(?:[-–]{_NUMBER})?(?:g|kg|ml|l|oz|lbs?)?$')
_MEASURE_WORDS = frozenset(MEASURE_WORDS)


def _strip_quantity(words):
    i = 0
    while i < len(words) and _QUANTITY_RE.match(words[i]):
        i += 1
    if i == 0:
        return words
    while i < len(words) and words[i] in _MEASURE_WORDS:
        i += 1
    if i < len(words) and words[i] == 'of':
        i += 1
    return words[i:]


def normalize_ingredient_name(raw: str) -> str:
    """Return the lowercase, descriptor-free, whitespace-collapsed ingredient name.

    Leading quantities (and the measure words right after them), parenthetical
    notes, a trailing "to taste" and anything after the first comma are dropped.
    The result can be empty when the input held nothing but descriptors.
    """
    text = (raw or '').lower().strip()
    text = _PARENTHETICAL_RE.sub(' ', text)
    text = text.split(',', 1)[0].strip()
    text = _TO_TASTE_RE.sub('', text)
    words = _strip_quantity(text.split())
    text = _DESCRIPTOR_RE.sub('', ' '.join(words))
    return _WHITESPACE_RE.sub(' ', text).strip()


__all__ = ['normalize_ingredient_name']
