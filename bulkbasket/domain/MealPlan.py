"""Meal plan domain entities: days -> meal slots -> meals with free-text ingredients."""
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple


class Meal:
    def __init__(self, title: str = "", ingredients: Optional[List[str]] = None):
        self.title = title
        self.ingredients = ingredients[:] if ingredients else []

    def __str__(self) -> str:
        return f"{self.title or 'Untitled meal'} ({len(self.ingredients)} ingredients)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "Meal":
        '''Creates a Meal from a dictionary. Missing or malformed fields fall back to empty values.'''
        d = data if isinstance(data, Mapping) else {}
        title = d.get("title") or d.get("name") or ""
        raw = d.get("ingredients")
        ingredients = [i for i in raw if isinstance(i, str)] if isinstance(raw, (list, tuple)) else []
        return Meal(str(title), ingredients)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "ingredients": list(self.ingredients)}


class MealPlan:
    def __init__(self, days: Optional[Dict[str, Dict[str, Meal]]] = None):
        self.days = days if days is not None else {}

    def iter_meals(self) -> Iterator[Tuple[str, str, Meal]]:
        '''Yields (day, slot, meal) in plan order.'''
        for day, slots in self.days.items():
            for slot, meal in slots.items():
                yield day, slot, meal

    def meal_count(self) -> int:
        return sum(len(slots) for slots in self.days.values())

    def __str__(self) -> str:
        return f"MealPlan({len(self.days)} days, {self.meal_count()} meals)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data) -> "MealPlan":
        '''Builds a MealPlan from the nested day/slot mapping.

        Days or slots that are not mappings are skipped. Raises TypeError when
        the top-level value is not a mapping at all.
        '''
        if not isinstance(data, Mapping):
            raise TypeError(f"meal plan must be a mapping, got {type(data).__name__}")
        days: Dict[str, Dict[str, Meal]] = {}
        for day, slots in data.items():
            if not isinstance(slots, Mapping):
                continue
            days[str(day)] = {
                str(slot): Meal.from_dict(meal)
                for slot, meal in slots.items()
                if isinstance(meal, Mapping)
            }
        return MealPlan(days)

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        return {
            day: {slot: meal.to_dict() for slot, meal in slots.items()}
            for day, slots in self.days.items()
        }
