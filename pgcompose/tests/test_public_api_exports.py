from pgcompose import (
    __version__,
    CompiledQuery,
    LocalIdentifier,
    MinifyError,
    ObservabilitySettings,
    PostgresCompiler,
    QueryCompositionError,
    SQLQuery,
    minify,
    sql,
)
from pgcompose.compiler import CompiledQuery as CompiledQueryFromCompiler
from pgcompose.items import IdentifierItem


def test_root_public_api_exports_are_importable() -> None:
    assert __version__
    assert isinstance(sql("select 1"), SQLQuery)
    assert PostgresCompiler is not None
    assert ObservabilitySettings is not None
    assert minify("a  b") == "a b"
    assert issubclass(QueryCompositionError, ValueError)
    assert MinifyError is not None


def test_compiler_exports_include_compiled_query() -> None:
    assert CompiledQueryFromCompiler is CompiledQuery


def test_sql_exposes_builders() -> None:
    assert sql.ident is not None
    assert sql.local is LocalIdentifier
    assert sql.ident("a").items == (IdentifierItem(("a",)),)
