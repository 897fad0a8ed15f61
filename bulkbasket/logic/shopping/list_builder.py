"""Shopping list builder.

Provides build_shopping_list(records) for the flat annotated list and
build_organized_shopping_list(records) for the department view.
"""
from typing import Iterable, List

from bulkbasket.domain.IngredientAnalysis import IngredientAnalysis
from bulkbasket.domain.ShoppingList import OrganizedShoppingList
from bulkbasket.logic.shopping.bulk_discount import total_bulk_savings
from bulkbasket.logic.shopping.departments import bulk_recommendation, department_for
from bulkbasket.utilities.constants import HIGH_VALUE_THRESHOLD, SAVINGS_DISPLAY_THRESHOLD


def _format_line(record: IngredientAnalysis, usage_template: str) -> str:
    text = record.name
    recommendation = bulk_recommendation(record.name, record.usage_count)
    if recommendation:
        text += f" - {recommendation}"
    if record.usage_count > 1:
        text += usage_template.format(count=record.usage_count)
    if record.bulk_savings > SAVINGS_DISPLAY_THRESHOLD:
        text += f" - Save ${record.bulk_savings:.2f}"
    return text


def build_shopping_list(records: Iterable[IngredientAnalysis]) -> List[str]:
    """Annotated lines, biggest savings first, then most used.

    Ties keep their input order.
    """
    ordered = sorted(records, key=lambda r: (-r.bulk_savings, -r.usage_count))
    return [_format_line(r, " (used {count}x)") for r in ordered]


def build_organized_shopping_list(records: Iterable[IngredientAnalysis]) -> OrganizedShoppingList:
    """Group annotated lines by store department.

    Items are ordered by savings (descending) inside each department;
    high_value_items lists the names saving more than HIGH_VALUE_THRESHOLD.
    """
    records = list(records)
    organized = OrganizedShoppingList(total_savings=total_bulk_savings(records))
    for record in sorted(records, key=lambda r: -r.bulk_savings):
        if record.bulk_savings > HIGH_VALUE_THRESHOLD:
            organized.high_value_items.append(record.name)
        organized.add_item(department_for(record.name), _format_line(record, " ({count}x)"))
    return organized


__all__ = ['build_shopping_list', 'build_organized_shopping_list']
