from typing import Any
from pgcompose.items.models import SQLItem

class ItemVisitor:
    """
    A base class for walking a flat sequence of query items.
    """
    def visit(self, item: SQLItem, *args: Any) -> Any:
        """
        The entry point for visiting an item. Dispatches to the correct visit method.
        """
        method_name = f'visit_{item.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(item, *args)

    def generic_visit(self, item: SQLItem, *args: Any) -> Any:
        """
        Called if no explicit visit method exists for an item type.
        """
        raise NotImplementedError(f"No visit_{item.__class__.__name__} method defined in {self.__class__.__name__}")
