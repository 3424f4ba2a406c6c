from typing import Any, Iterable

# ==================================================
# Identifier Escaping
# ==================================================

def escape_identifier(name: str) -> str:
    """
    Quotes a PostgreSQL identifier, doubling any embedded double quote.
    """
    return '"' + name.replace('"', '""') + '"'


_VALUE_KEY_TYPES = (int, float, bool, bytes, type(None))


class LocalIdentifierMap:
    """
    Assigns `__local_<n>__` names to non-string identifier keys, in order of
    first use. Numbers, booleans, bytes and None are compared by value; any
    other key is compared by identity, so unhashable objects work too.
    One map lives for exactly one compilation.
    """

    def __init__(self) -> None:
        self._names: dict[Any, str] = {}
        # Holds the keys so their ids stay unique while the map is alive.
        self._keys: list[Any] = []

    def __len__(self) -> int:
        return len(self._names)

    def _lookup_key(self, key: Any) -> Any:
        if isinstance(key, _VALUE_KEY_TYPES):
            return (type(key), key)
        return id(key)

    def resolve(self, key: Any) -> str:
        lookup_key = self._lookup_key(key)
        name = self._names.get(lookup_key)
        if name is None:
            name = f"__local_{len(self._names)}__"
            self._names[lookup_key] = name
            self._keys.append(key)
        return name


def resolve_identifier(names: Iterable[Any], local_identifiers: LocalIdentifierMap) -> str:
    """
    Renders a possibly qualified identifier. Parts are joined with a period.
    """
    return ".".join(
        escape_identifier(name) if isinstance(name, str) else local_identifiers.resolve(name)
        for name in names
    )
