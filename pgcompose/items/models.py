from abc import ABC
from dataclasses import dataclass
from typing import Any

# ==================================================
# Base classes
# ==================================================

@dataclass(frozen=True)
class SQLItem(ABC):
    """
    A single fragment of a query. All specific item types inherit from this base class.
    """
    pass

# ==================================================
# Specific items
# ==================================================

@dataclass(frozen=True)
class RawItem(SQLItem):
    """
    Literal SQL text, emitted verbatim when the query is compiled.
    """
    text: str

@dataclass(frozen=True)
class ValueItem(SQLItem):
    """
    A value bound to a positional placeholder. Never written into the query text.
    """
    value: Any

@dataclass(frozen=True)
class IdentifierItem(SQLItem):
    """
    A possibly qualified identifier. String names are quoted, any other name
    is replaced by a local identifier scoped to a single compilation.
    """
    names: tuple[Any, ...] = ()

# ==================================================
# Opaque identifier keys
# ==================================================

class LocalIdentifier:
    """
    An opaque identifier key. Two instances never resolve to the same local name.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "LocalIdentifier()"
        return f"LocalIdentifier({self.description!r})"
