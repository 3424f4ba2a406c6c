from dataclasses import dataclass, field
from typing import Any

# ==================================================
# Compiled Output
# ==================================================

@dataclass
class CompiledQuery:
    """
    Represents the result of the compilation process: query text with `$n`
    placeholders and the values bound to them, in placeholder order.
    """
    text: str
    values: list[Any] = field(default_factory=list)

    def as_tuple(self) -> tuple[str, list[Any]]:
        """
        Returns `(text, values)` for drivers taking positional arguments.
        """
        return self.text, self.values
