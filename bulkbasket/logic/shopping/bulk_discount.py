"""Bulk discount estimation.

More reuse of an ingredient across the plan means it can be bought in a larger
pack; the discount is a fixed step function of the usage count.
"""
from typing import Iterable, List, Mapping, Tuple

from bulkbasket.domain.IngredientAnalysis import IngredientAnalysis
from bulkbasket.logic.shopping.price_lookup import resolve_price
from bulkbasket.utilities.constants import BULK_DISCOUNT_TIERS, NO_DISCOUNT_MULTIPLIER


def bulk_multiplier(usage_count: int) -> float:
    """Cost multiplier (<= 1) for an ingredient used usage_count times."""
    for min_usage, multiplier in BULK_DISCOUNT_TIERS:
        if usage_count >= min_usage:
            return multiplier
    return NO_DISCOUNT_MULTIPLIER


def estimate_bulk_cost(unit_price: float, usage_count: int) -> Tuple[float, float]:
    """Return (estimated_cost, savings) for buying usage_count units in bulk."""
    regular_cost = usage_count * unit_price
    bulk_cost = regular_cost * bulk_multiplier(usage_count)
    return bulk_cost, regular_cost - bulk_cost


def analyze_ingredients(usage: Mapping[str, int]) -> List[IngredientAnalysis]:
    """Build one IngredientAnalysis per ingredient, keeping the mapping's order."""
    records: List[IngredientAnalysis] = []
    for name, count in usage.items():
        match = resolve_price(name)
        cost, savings = estimate_bulk_cost(match.price, count)
        records.append(IngredientAnalysis(
            name=name,
            usage_count=count,
            unit_price=match.price,
            bulk_multiplier=bulk_multiplier(count),
            estimated_cost=cost,
            bulk_savings=savings,
            matched_item=match.item,
        ))
    return records


def total_bulk_savings(records: Iterable[IngredientAnalysis]) -> float:
    return sum(r.bulk_savings for r in records)


__all__ = ['bulk_multiplier', 'estimate_bulk_cost', 'analyze_ingredients', 'total_bulk_savings']
