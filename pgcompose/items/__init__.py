from pgcompose.items.models import (
    SQLItem,
    RawItem,
    ValueItem,
    IdentifierItem,
    LocalIdentifier,
)

__all__ = [
    "SQLItem",
    "RawItem",
    "ValueItem",
    "IdentifierItem",
    "LocalIdentifier",
]
