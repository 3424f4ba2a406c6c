from __future__ import annotations

from typing import Any, Iterable, Sequence

from pgcompose.errors import QueryCompositionError
from pgcompose.items.models import SQLItem, RawItem, ValueItem, IdentifierItem, LocalIdentifier
from pgcompose.compiler.compiled_query import CompiledQuery
from pgcompose.compiler.postgres.postgres_compiler import PostgresCompiler

_DEFAULT_COMPILER = PostgresCompiler()

# ==================================================
# SQL Query
# ==================================================

class SQLQuery:
    """
    An immutable, flat sequence of query items.

    Nothing ever mutates a query: every builder returns a new `SQLQuery`, and
    queries spliced into another query contribute their items, not themselves.
    The compiled form is computed on first use and cached.
    """

    __slots__ = ("_items", "_compiled")

    def __init__(self, items: Iterable[SQLItem] = ()) -> None:
        self._items: tuple[SQLItem, ...] = tuple(items)
        self._compiled: CompiledQuery | None = None

    # --------------------------------------------------
    # Builders
    # --------------------------------------------------

    @classmethod
    def query(cls, strings: Sequence[str], *values: Any) -> SQLQuery:
        """
        Interleaves literal fragments with interpolated values.

        `strings` must hold exactly one more fragment than there are values.
        Interpolated queries are spliced in; anything else becomes a bound value.
        """
        if not (len(strings) == len(values) + 1 or (not strings and not values)):
            raise QueryCompositionError(
                f"Expected {len(values) + 1} fragments for {len(values)} values, got {len(strings)}."
            )

        items: list[SQLItem] = []
        for index, text in enumerate(strings):
            if not isinstance(text, str):
                raise QueryCompositionError(
                    f"Fragment {index} must be a string, got {type(text).__name__}."
                )
            items.append(RawItem(text))

            if index < len(values):
                value = values[index]
                if isinstance(value, SQLQuery):
                    items.extend(value._items)
                else:
                    items.append(ValueItem(value))

        return cls(items)

    @classmethod
    def compose(cls, parts: Iterable[Any]) -> SQLQuery:
        """
        Builds a query from alternating fragments and values:
        `[fragment, value, fragment, value, ...]`. A missing final fragment is empty.

        Even positions must be text, so a list that opens with a value needs a
        leading `""`: `["", sql.ident("t"), " = ", 1]`.
        """
        parts = list(parts)
        strings = parts[0::2]
        values = parts[1::2]
        if len(strings) == len(values):
            strings.append("")
        return cls.query(strings, *values)

    @classmethod
    def join(cls, queries: Iterable[SQLQuery], separator: str | None = None) -> SQLQuery:
        """
        Concatenates queries, putting `separator` as raw text between each pair.
        """
        items: list[SQLItem] = []
        for index, query in enumerate(queries):
            if not isinstance(query, SQLQuery):
                raise QueryCompositionError(
                    f"Only SQLQuery values can be joined, got {type(query).__name__} at position {index}."
                )
            if index and separator:
                items.append(RawItem(separator))
            items.extend(query._items)
        return cls(items)

    @classmethod
    def raw(cls, text: str) -> SQLQuery:
        """
        Creates a query from trusted text. The text is not escaped in any way.
        """
        return cls([RawItem(text)])

    @classmethod
    def value(cls, value: Any) -> SQLQuery:
        """
        Creates a query holding a single placeholder for `value`.
        """
        return cls([ValueItem(value)])

    @classmethod
    def identifier(cls, *names: Any) -> SQLQuery:
        """
        Creates an identifier query. String names are quoted and joined with a
        period; other names become local identifiers at compile time.
        """
        return cls([IdentifierItem(names)])

    # --------------------------------------------------
    # Compilation
    # --------------------------------------------------

    @property
    def items(self) -> tuple[SQLItem, ...]:
        return self._items

    @property
    def text(self) -> str:
        """
        The query text, with `$n` placeholders referring to `values`.
        """
        return self.compile().text

    @property
    def values(self) -> list[Any]:
        """
        A copy of the values filling the placeholders in `text`. Mutating it
        leaves the compiled query untouched.
        """
        return list(self.compile().values)

    def compile(self, compiler: PostgresCompiler | None = None) -> CompiledQuery:
        """
        Compiles the query once and returns the cached result afterwards.
        `compiler` only takes effect on the first call.
        """
        if self._compiled is None:
            self._compiled = (compiler or _DEFAULT_COMPILER).compile(self._items)
        return self._compiled

    # --------------------------------------------------
    # Python protocol
    # --------------------------------------------------

    def __add__(self, other: object) -> SQLQuery:
        if not isinstance(other, SQLQuery):
            return NotImplemented
        return SQLQuery(self._items + other._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"SQLQuery(items={list(self._items)!r})"

# ==================================================
# Public Entry Point
# ==================================================

def _is_template(obj: Any) -> bool:
    return hasattr(obj, "strings") and hasattr(obj, "interpolations")


class SQL:
    """
    The `sql` entry point.

    Call it with fragments and values (`sql(["select ", ""], 1)`), with a
    single string (`sql("select 1")`), or with a template string object such
    as `sql(t"select * from users where id = {user_id}")`.
    """

    compose = SQLQuery.compose
    join = SQLQuery.join
    raw = SQLQuery.raw
    value = SQLQuery.value
    ident = SQLQuery.identifier
    identifier = SQLQuery.identifier
    local = LocalIdentifier

    def __call__(self, strings: Any, *values: Any) -> SQLQuery:
        if not values and _is_template(strings):
            return SQLQuery.query(
                tuple(strings.strings),
                *(interpolation.value for interpolation in strings.interpolations),
            )
        if isinstance(strings, str):
            strings = (strings,)
        return SQLQuery.query(strings, *values)


sql = SQL()
