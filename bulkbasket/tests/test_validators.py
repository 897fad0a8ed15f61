import unittest
from pydantic import ValidationError
from bulkbasket.utilities.validators import MealInput, MealOverlapRequest, MealPlanRequest


class TestMealPlanRequest(unittest.TestCase):

    def test_wrapped_plan(self):
        req = MealPlanRequest.model_validate({"meal_plan": {"mon": {"lunch": {"ingredients": ["rice"]}}}})
        self.assertEqual(req.meal_plan, {"mon": {"lunch": {"title": "", "ingredients": ["rice"]}}})

    def test_bare_plan(self):
        req = MealPlanRequest.model_validate({"mon": {"lunch": {"title": "Bowl", "ingredients": ["rice"]}}})
        self.assertEqual(list(req.meal_plan), ["mon"])
        self.assertEqual(req.meal_plan["mon"]["lunch"]["title"], "Bowl")

    def test_permissive_meals(self):
        req = MealPlanRequest.model_validate({
            "mon": {"lunch": {"title": None, "ingredients": None}, "snack": "apple"},
            "tue": "rest",
        })
        self.assertEqual(req.meal_plan, {"mon": {"lunch": {"title": "", "ingredients": []}}})

    def test_non_string_ingredients_dropped(self):
        req = MealPlanRequest.model_validate({"mon": {"lunch": {"ingredients": ["rice", 2, None]}}})
        self.assertEqual(req.meal_plan["mon"]["lunch"]["ingredients"], ["rice"])

    def test_wrapped_plan_with_extra_keys(self):
        req = MealPlanRequest.model_validate({
            "meal_plan": {"mon": {"lunch": {"title": "Bowl", "ingredients": ["rice"]}}},
            "user": "u-1",
        })
        self.assertEqual(list(req.meal_plan), ["mon"])
        self.assertEqual(req.meal_plan["mon"]["lunch"]["ingredients"], ["rice"])

    def test_meal_name_used_as_title(self):
        req = MealPlanRequest.model_validate({"mon": {"lunch": {"name": "Bowl", "ingredients": ["rice"]}}})
        self.assertEqual(req.meal_plan["mon"]["lunch"], {"title": "Bowl", "ingredients": ["rice"]})

    def test_empty_body(self):
        self.assertEqual(MealPlanRequest.model_validate({}).meal_plan, {})

    def test_not_an_object(self):
        with self.assertRaises(ValidationError):
            MealPlanRequest.model_validate(["rice"])


class TestMealOverlapRequest(unittest.TestCase):

    def test_requires_both_meals(self):
        with self.assertRaises(ValidationError):
            MealOverlapRequest.model_validate({"meal_a": {"ingredients": ["rice"]}})


class TestMealInput(unittest.TestCase):

    def test_name_fills_missing_title(self):
        self.assertEqual(MealInput.model_validate({"name": "Soup"}).title, "Soup")

    def test_title_wins_over_name(self):
        self.assertEqual(MealInput.model_validate({"title": "Stew", "name": "Soup"}).title, "Stew")
