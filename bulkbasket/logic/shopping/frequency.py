"""Ingredient usage counting across a meal plan."""
import logging
from typing import Dict

from bulkbasket.domain.MealPlan import MealPlan
from bulkbasket.logic.shopping.normalizer import normalize_ingredient_name

logger = logging.getLogger(__name__)


def count_ingredient_usage(meal_plan) -> Dict[str, int]:
    """Map each normalized ingredient name to the number of meals that list it.

    Args:
        meal_plan: MealPlan instance or the raw day -> slot -> meal mapping.

    Returns:
        Dict ordered by first appearance. A meal counts once per ingredient no
        matter how often it repeats it; names that normalize to "" are skipped.

    Raises:
        TypeError: if meal_plan is neither a MealPlan nor a mapping.
    """
    plan = meal_plan if isinstance(meal_plan, MealPlan) else MealPlan.from_dict(meal_plan)

    usage: Dict[str, int] = {}
    for _day, _slot, meal in plan.iter_meals():
        seen = set()
        for raw in meal.ingredients:
            name = normalize_ingredient_name(raw)
            if not name or name in seen:
                continue
            seen.add(name)
            usage[name] = usage.get(name, 0) + 1

    logger.debug("Counted %d distinct ingredients across %d meals", len(usage), plan.meal_count())
    return usage


__all__ = ['count_ingredient_usage']
