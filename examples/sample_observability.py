import logging

from pgcompose import (
    LocalIdentifier,
    ObservabilitySettings,
    PostgresCompiler,
    compose_compile_observers,
    make_json_compile_logger,
    sql,
)

# ==================================================
# App-Level Observability Wiring
# ==================================================
# This example shows consumer-side setup only.
# No changes to pgcompose source code are required.

compile_logger = logging.getLogger("pgcompose.compile")
compile_logger.setLevel(logging.INFO)
compile_logger.addHandler(logging.StreamHandler())

observations = []

compiler = PostgresCompiler(
    observability_settings=ObservabilitySettings(
        compile_observer=compose_compile_observers(
            make_json_compile_logger(logger=compile_logger),
            observations.append,
        ),
        metadata={"service": "example-app", "env": "local"},
    ),
)

orders = LocalIdentifier("orders")
query = sql(
    ["SELECT ", " FROM ", " AS ", " WHERE ", " > ", ""],
    sql.ident(orders, "total"),
    sql.ident("public", "orders"),
    sql.ident(orders),
    sql.ident(orders, "total"),
    100,
)
compiled = query.compile(compiler)

print("text:", compiled.text)
print("values:", compiled.values)
print("observed compilations:", len(observations))
