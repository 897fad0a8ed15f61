"""Meal plan -> bulk-aware shopping list pipeline.

usage counting -> price lookup -> bulk discount -> list formatting. Everything
is computed from the plan passed in; nothing is cached between calls.
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from bulkbasket.domain.MealPlan import Meal
from bulkbasket.domain.ShoppingList import OrganizedShoppingList
from bulkbasket.logic.shopping.bulk_discount import analyze_ingredients, total_bulk_savings
from bulkbasket.logic.shopping.frequency import count_ingredient_usage
from bulkbasket.logic.shopping.list_builder import build_organized_shopping_list, build_shopping_list
from bulkbasket.logic.shopping.normalizer import normalize_ingredient_name

logger = logging.getLogger(__name__)


def optimize_meal_plan(meal_plan) -> Dict[str, Any]:
    """Analyze ingredient reuse for a plan.

    Returns:
        { optimized_plan, ingredient_analysis (IngredientAnalysis list),
          estimated_savings, shopping_list (annotated lines) }
    """
    usage = count_ingredient_usage(meal_plan)
    analysis = analyze_ingredients(usage)
    savings = total_bulk_savings(analysis)
    shopping_list = build_shopping_list(analysis)
    logger.debug("Optimized plan: %d ingredients, estimated savings %.2f", len(analysis), savings)
    return {
        'optimized_plan': meal_plan,
        'ingredient_analysis': analysis,
        'estimated_savings': savings,
        'shopping_list': shopping_list,
    }


def shopping_recommendations(organized: OrganizedShoppingList) -> List[str]:
    recommendations = []
    if organized.total_savings > 5:
        recommendations.append(
            f"Estimated total savings: ${organized.total_savings:.2f} with bulk buying")
    if organized.high_value_items:
        recommendations.append(
            "Priority items for maximum savings: " + ", ".join(organized.high_value_items[:3]))
    if len(organized.meat) > 2:
        recommendations.append("Consider buying proteins in bulk and freezing portions")
    if len(organized.produce) > 3:
        recommendations.append(
            "Shop produce section first and prep items that can be washed/chopped in advance")
    recommendations.append("Shop by department: Produce -> Meat -> Dairy -> Pantry for efficiency")
    return recommendations


def create_optimized_shopping_list(meal_plan) -> Dict[str, Any]:
    """Full shopping list payload: flat list, department sections and tips."""
    optimization = optimize_meal_plan(meal_plan)
    organized = build_organized_shopping_list(optimization['ingredient_analysis'])
    return {
        'shopping_list': optimization['shopping_list'],
        'organized_sections': organized,
        'total_savings': organized.total_savings,
        'high_value_items': list(organized.high_value_items),
        'ingredient_analysis': optimization['ingredient_analysis'],
        'recommendations': shopping_recommendations(organized),
    }


def _ingredient_set(meal) -> set:
    if isinstance(meal, Mapping):
        meal = Meal.from_dict(meal)
    names = {normalize_ingredient_name(i) for i in meal.ingredients}
    names.discard('')
    return names


def score_meal_overlap(meal_a, meal_b) -> float:
    """Jaccard similarity of two meals' normalized ingredient sets (0.0 - 1.0)."""
    set_a = _ingredient_set(meal_a)
    set_b = _ingredient_set(meal_b)
    union = set_a | set_b
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(union)


__all__ = [
    'optimize_meal_plan',
    'create_optimized_shopping_list',
    'shopping_recommendations',
    'score_meal_overlap',
]
