import unittest
from bulkbasket.domain.MealPlan import MealPlan
from bulkbasket.logic.shopping.frequency import count_ingredient_usage


PLAN = {
    "monday": {
        "breakfast": {"title": "Eggs", "ingredients": ["2 eggs", "Fresh spinach", "spinach"]},
        "dinner": {"title": "Rice bowl", "ingredients": ["1 onion", "chopped onion", "rice"]},
    },
    "tuesday": {
        "lunch": {"title": "Leftovers"},
        "dinner": {"title": "Soup", "ingredients": ["Onion", None, 5]},
    },
    "wednesday": "rest day",
}


class TestCountIngredientUsage(unittest.TestCase):

    def test_counts_once_per_meal(self):
        usage = count_ingredient_usage(PLAN)
        self.assertEqual(usage, {"eggs": 1, "spinach": 1, "onion": 2, "rice": 1})

    def test_first_appearance_order(self):
        self.assertEqual(list(count_ingredient_usage(PLAN)), ["eggs", "spinach", "onion", "rice"])

    def test_accepts_meal_plan_instance(self):
        plan = MealPlan.from_dict(PLAN)
        self.assertEqual(count_ingredient_usage(plan), count_ingredient_usage(PLAN))

    def test_empty_plan(self):
        self.assertEqual(count_ingredient_usage({}), {})

    def test_descriptor_only_ingredients_skipped(self):
        plan = {"d1": {"lunch": {"ingredients": ["fresh", "chopped", "tuna"]}}}
        self.assertEqual(count_ingredient_usage(plan), {"tuna": 1})

    def test_sum_matches_distinct_pairs(self):
        usage = count_ingredient_usage(PLAN)
        # monday breakfast: eggs, spinach; monday dinner: onion, rice; tuesday dinner: onion
        self.assertEqual(sum(usage.values()), 5)

    def test_non_mapping_plan_raises(self):
        with self.assertRaises(TypeError):
            count_ingredient_usage(None)
        with self.assertRaises(TypeError):
            count_ingredient_usage(["onion"])
