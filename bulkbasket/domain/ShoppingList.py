"""OrganizedShoppingList aggregate: annotated lines bucketed by store department."""
from typing import Any, Dict, List, Optional

from bulkbasket.utilities.constants import DEPARTMENTS


class OrganizedShoppingList:
    def __init__(self, sections: Optional[Dict[str, List[str]]] = None,
                 total_savings: float = 0.0, high_value_items: Optional[List[str]] = None):
        self.sections: Dict[str, List[str]] = {d: [] for d in DEPARTMENTS}
        for department, lines in (sections or {}).items():
            self.sections[department] = list(lines)
        self.total_savings = total_savings
        self.high_value_items = high_value_items[:] if high_value_items else []

    def add_item(self, department: str, line: str):
        '''
        Appends a line to a department bucket; unknown departments go to "other".
        '''
        if department not in self.sections:
            department = "other"
        self.sections[department].append(line)

    @property
    def produce(self) -> List[str]:
        return self.sections["produce"]

    @property
    def meat(self) -> List[str]:
        return self.sections["meat"]

    @property
    def dairy(self) -> List[str]:
        return self.sections["dairy"]

    @property
    def pantry(self) -> List[str]:
        return self.sections["pantry"]

    @property
    def other(self) -> List[str]:
        return self.sections["other"]

    def item_count(self) -> int:
        return sum(len(lines) for lines in self.sections.values())

    def __str__(self) -> str:
        return f"Shopping List ({self.item_count()} items, save ${self.total_savings:.2f})"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {d: list(self.sections[d]) for d in DEPARTMENTS}
        data["total_savings"] = round(self.total_savings, 2)
        data["high_value_items"] = list(self.high_value_items)
        return data
