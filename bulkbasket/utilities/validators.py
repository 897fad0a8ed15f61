"""
Input validation schemas using Pydantic for the shopping list API.
"""
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator


class MealInput(BaseModel):
    """Schema for a single meal; only the ingredient list matters for shopping."""
    title: str = ""
    ingredients: List[Any] = Field(default_factory=list)

    @model_validator(mode='before')
    @classmethod
    def title_from_name(cls, data):
        """Meals may carry their title under "name"."""
        if isinstance(data, dict) and data.get('title') is None and 'name' in data:
            return {**data, 'title': data['name']}
        return data

    @field_validator('title', mode='before')
    @classmethod
    def default_title(cls, v):
        """Null titles become empty strings."""
        return "" if v is None else str(v)

    @field_validator('ingredients', mode='before')
    @classmethod
    def default_ingredients(cls, v):
        """Treat a missing or null ingredient list as empty."""
        return v if isinstance(v, list) else []

    @field_validator('ingredients')
    @classmethod
    def keep_strings(cls, v):
        """Drop anything that is not free text."""
        return [i for i in v if isinstance(i, str)]


class MealPlanRequest(BaseModel):
    """Meal plan body: either the plan itself or wrapped as {"meal_plan": {...}}."""
    meal_plan: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def unwrap_plan(cls, data):
        """Accept the bare day -> slot -> meal mapping as the whole body."""
        if not isinstance(data, dict):
            return data
        if isinstance(data.get('meal_plan'), dict):
            return {'meal_plan': data['meal_plan']}
        if len(data) == 1 and 'meal_plan' in data:
            return data
        return {'meal_plan': data}

    @field_validator('meal_plan')
    @classmethod
    def validate_meals(cls, v):
        """Keep only days and meals shaped like objects; validate their ingredient lists."""
        plan: Dict[str, Dict[str, Dict[str, Any]]] = {}
        for day, slots in v.items():
            if not isinstance(slots, dict):
                continue
            plan[day] = {
                slot: MealInput.model_validate(meal).model_dump()
                for slot, meal in slots.items()
                if isinstance(meal, dict)
            }
        return plan


class MealOverlapRequest(BaseModel):
    """Schema for comparing two meals."""
    meal_a: MealInput
    meal_b: MealInput


class RateLimitError(BaseModel):
    """Body returned with HTTP 429."""
    message: str
    remaining_requests: int
    reset_time: float
