"""Unit price lookup for normalized ingredient names.

Exact table hit first, then a fuzzy scan of the whole table. The scan keeps the
first entry reaching the best score (strictly-greater replacement), so ties are
decided by PRICE_TABLE order.
"""
import logging
from typing import Mapping, NamedTuple, Optional

from rapidfuzz.distance import Levenshtein

from bulkbasket.utilities.constants import (
    CONTAINMENT_SCORE,
    DEFAULT_UNIT_PRICE,
    EXACT_MATCH_SCORE,
    MAX_WORD_EDIT_DISTANCE,
    MIN_MATCH_SCORE,
    PRICE_TABLE,
)

logger = logging.getLogger(__name__)


class PriceMatch(NamedTuple):
    price: float
    item: Optional[str]  # None when the default price was used
    score: float


def _words_match(word: str, ref_word: str) -> bool:
    if word in ref_word or ref_word in word:
        return True
    return Levenshtein.distance(word, ref_word, score_cutoff=MAX_WORD_EDIT_DISTANCE) <= MAX_WORD_EDIT_DISTANCE


def ingredient_match_score(ingredient: str, reference: str) -> float:
    """Similarity in [0, 1] between an ingredient name and a price table key."""
    if ingredient == reference:
        return EXACT_MATCH_SCORE
    if ingredient in reference or reference in ingredient:
        return CONTAINMENT_SCORE

    ingredient_words = ingredient.split()
    reference_words = reference.split()
    if not ingredient_words or not reference_words:
        return 0.0
    matching = sum(
        1 for word in ingredient_words
        if any(_words_match(word, ref) for ref in reference_words)
    )
    return matching / max(len(ingredient_words), len(reference_words))


def resolve_price(name: str, table: Mapping[str, float] = PRICE_TABLE,
                  default: float = DEFAULT_UNIT_PRICE) -> PriceMatch:
    key = (name or '').lower().strip()
    if not key:
        return PriceMatch(default, None, 0.0)
    if key in table:
        return PriceMatch(table[key], key, EXACT_MATCH_SCORE)

    best = PriceMatch(default, None, 0.0)
    for item, price in table.items():
        score = ingredient_match_score(key, item)
        if score > best.score and score > MIN_MATCH_SCORE:
            best = PriceMatch(price, item, score)

    if best.item is None:
        logger.debug("No price match for %r, using default %.2f", key, default)
    else:
        logger.debug("Fuzzy price match %r -> %r (score %.2f)", key, best.item, best.score)
    return best


def lookup_unit_price(name: str) -> float:
    """Estimated unit price for a normalized ingredient name (never raises)."""
    return resolve_price(name).price


__all__ = ['PriceMatch', 'ingredient_match_score', 'resolve_price', 'lookup_unit_price']
