from pgcompose.compiler.postgres.postgres_compiler import PostgresCompiler
from pgcompose.compiler.postgres.identifiers import escape_identifier
from pgcompose.compiler.compiled_query import CompiledQuery
from pgcompose.compiler.minify import minify

__all__ = [
    "PostgresCompiler",
    "CompiledQuery",
    "escape_identifier",
    "minify",
]
