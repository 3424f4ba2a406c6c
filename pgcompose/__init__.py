from importlib import metadata

from pgcompose.query import SQL, SQLQuery, sql
from pgcompose.items.models import (
    SQLItem,
    RawItem,
    ValueItem,
    IdentifierItem,
    LocalIdentifier,
)
from pgcompose.compiler import CompiledQuery, PostgresCompiler, escape_identifier, minify
from pgcompose.errors import (
    PgComposeError,
    QueryCompositionError,
    MinifyError,
    MinifyErrorDetails,
)
from pgcompose.observability import (
    CompileObservation,
    ObservabilitySettings,
    compile_observation_to_dict,
    compose_compile_observers,
    make_json_compile_logger,
)

try:
    __version__ = metadata.version("pgcompose")
except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "sql",
    "SQL",
    "SQLQuery",
    "SQLItem",
    "RawItem",
    "ValueItem",
    "IdentifierItem",
    "LocalIdentifier",
    "CompiledQuery",
    "PostgresCompiler",
    "escape_identifier",
    "minify",
    "PgComposeError",
    "QueryCompositionError",
    "MinifyError",
    "MinifyErrorDetails",
    "CompileObservation",
    "ObservabilitySettings",
    "compile_observation_to_dict",
    "compose_compile_observers",
    "make_json_compile_logger",
]
