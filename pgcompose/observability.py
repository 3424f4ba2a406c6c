from dataclasses import dataclass, field
import json
import logging
from typing import Any, Callable, Mapping

# ==================================================
# Observability Types
# ==================================================

CompileObserveHook = Callable[["CompileObservation"], None]


@dataclass(frozen=True)
class ObservabilitySettings:
    """
    Compilation observability settings.
    """

    compile_observer: CompileObserveHook | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CompileObservation:
    """
    Structured payload describing one compilation of an item sequence.
    """

    compiler: str
    text: str
    item_count: int
    value_count: int
    local_identifier_count: int
    duration_ms: float
    succeeded: bool
    metadata: Mapping[str, Any] = field(default_factory=dict)
    error_type: str | None = None
    error_message: str | None = None


def compile_observation_to_dict(observation: CompileObservation) -> dict[str, Any]:
    """
    Converts a CompileObservation dataclass into a JSON-safe dictionary.
    """

    return {
        "compiler": observation.compiler,
        "text": observation.text,
        "item_count": observation.item_count,
        "value_count": observation.value_count,
        "local_identifier_count": observation.local_identifier_count,
        "duration_ms": observation.duration_ms,
        "succeeded": observation.succeeded,
        "metadata": dict(observation.metadata),
        "error_type": observation.error_type,
        "error_message": observation.error_message,
    }


def make_json_compile_logger(
    *,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> CompileObserveHook:
    """
    Builds a CompileObserveHook that emits one JSON log line per CompileObservation.
    """

    def _log_observation(observation: CompileObservation) -> None:
        payload = compile_observation_to_dict(observation)
        logger.log(level, json.dumps(payload, separators=(",", ":"), sort_keys=True, default=str))

    return _log_observation


def compose_compile_observers(*observers: CompileObserveHook) -> CompileObserveHook:
    """
    Composes multiple compile observers into a single observer.
    """

    def _composed(observation: CompileObservation) -> None:
        for observer in observers:
            observer(observation)

    return _composed
