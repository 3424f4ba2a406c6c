from dataclasses import dataclass, field
import time
from typing import Any, Callable, Sequence

from pgcompose.items.models import SQLItem, RawItem, ValueItem, IdentifierItem
from pgcompose.traversal.visitor_pattern import ItemVisitor
from pgcompose.compiler.compiled_query import CompiledQuery
from pgcompose.compiler.minify import minify
from pgcompose.compiler.postgres.identifiers import LocalIdentifierMap, resolve_identifier
from pgcompose.observability import CompileObservation, ObservabilitySettings

Minifier = Callable[[str], str]

# ==================================================
# Compilation State
# ==================================================

@dataclass
class _CompilationState:
    """
    Everything a single compilation accumulates. Never shared between calls.
    """
    parts: list[str] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)
    local_identifiers: LocalIdentifierMap = field(default_factory=LocalIdentifierMap)

# ==================================================
# PostgreSQL Compiler
# ==================================================

class PostgresCompiler(ItemVisitor):
    """
    A visitor that compiles a flat item sequence into PostgreSQL text with
    `$n` placeholders and the list of values bound to them.
    """

    def __init__(
        self,
        minifier: Minifier = minify,
        observability_settings: ObservabilitySettings | None = None,
    ) -> None:
        self.minifier = minifier
        self.observability_settings = observability_settings

    def compile(self, items: Sequence[SQLItem]) -> CompiledQuery:
        """
        The main entry point for compiling an item sequence.
        """
        state = _CompilationState()
        settings = self.observability_settings
        if settings is None:
            return self._compile(items, state)

        started = time.perf_counter()
        compiled: CompiledQuery | None = None
        error: Exception | None = None
        try:
            compiled = self._compile(items, state)
            return compiled
        except Exception as exc:
            error = exc
            raise
        finally:
            duration_ms = (time.perf_counter() - started) * 1000
            if settings.compile_observer is not None:
                settings.compile_observer(
                    CompileObservation(
                        compiler=self.__class__.__name__,
                        text=compiled.text if compiled is not None else "".join(state.parts),
                        item_count=len(items),
                        value_count=len(state.values),
                        local_identifier_count=len(state.local_identifiers),
                        duration_ms=duration_ms,
                        succeeded=error is None,
                        metadata=dict(settings.metadata),
                        error_type=type(error).__name__ if error is not None else None,
                        error_message=str(error) if error is not None else None,
                    )
                )

    def _compile(self, items: Sequence[SQLItem], state: _CompilationState) -> CompiledQuery:
        for item in items:
            self.visit(item, state)
        return CompiledQuery(text=self.minifier("".join(state.parts)), values=state.values)

    # --------------------------------------------------
    # Items
    # --------------------------------------------------

    def visit_RawItem(self, item: RawItem, state: _CompilationState) -> None:
        state.parts.append(item.text)

    def visit_ValueItem(self, item: ValueItem, state: _CompilationState) -> None:
        """
        Emits the next positional placeholder. Equal values still get their own.
        """
        state.parts.append(f"${len(state.values) + 1}")
        state.values.append(item.value)

    def visit_IdentifierItem(self, item: IdentifierItem, state: _CompilationState) -> None:
        state.parts.append(resolve_identifier(item.names, state.local_identifiers))
