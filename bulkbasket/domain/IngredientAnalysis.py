"""IngredientAnalysis: per-ingredient usage, unit price and bulk-buy estimate."""
from typing import Any, Dict, Optional


class IngredientAnalysis:
    def __init__(self, name: str, usage_count: int, unit_price: float,
                 bulk_multiplier: float = 1.0, estimated_cost: float = 0.0,
                 bulk_savings: float = 0.0, matched_item: Optional[str] = None):
        self.name = name
        self.usage_count = usage_count
        # One unit is assumed per use
        self.total_quantity = usage_count
        self.unit_price = unit_price
        self.bulk_multiplier = bulk_multiplier
        self.estimated_cost = estimated_cost
        self.bulk_savings = bulk_savings
        self.matched_item = matched_item

    @property
    def regular_cost(self) -> float:
        return self.total_quantity * self.unit_price

    def __str__(self) -> str:
        return (f"{self.name} - used {self.usage_count}x - "
                f"${self.estimated_cost:.2f} (save ${self.bulk_savings:.2f})")

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "usage_count": self.usage_count,
            "total_quantity": self.total_quantity,
            "unit_price": self.unit_price,
            "matched_item": self.matched_item,
            "bulk_multiplier": self.bulk_multiplier,
            "estimated_cost": round(self.estimated_cost, 2),
            "bulk_savings": round(self.bulk_savings, 2),
        }
