from pgcompose.compiler.postgres.postgres_compiler import PostgresCompiler
from pgcompose.compiler.postgres.identifiers import escape_identifier

__all__ = ["PostgresCompiler", "escape_identifier"]
