"""
Engine factory wiring configuration, logging and metrics.
"""

from typing import Iterable, Optional, Union

from shared.config import EngineConfig, get_config
from shared.logging import configure_logging, get_logger
from shared.metrics import MetricsCollector, get_metrics_collector, get_served_collector
from .engine import Engine
from .models import S, TransitionLike, TransitionTable


def build_engine(
    state: S,
    transition_table: Union[TransitionTable, Iterable[TransitionLike]],
    config: Optional[EngineConfig] = None,
    name: str = "engine",
    metrics: Optional[MetricsCollector] = None,
) -> Engine[S]:
    """Create an engine with logging configured and, if enabled, metrics attached."""
    config = config or get_config()
    configure_logging("transition_engine", config.log_level, json_logs=config.json_logs)

    if metrics is None and config.metrics_enabled:
        # One server per port; engines built for that port share its collector
        if config.metrics_port:
            metrics = get_served_collector(name, config.metrics_port)
        else:
            metrics = get_metrics_collector(name)

    engine = Engine(state, transition_table, metrics=metrics, name=name)
    logger = get_logger("transition_engine.factory")
    logger.info(
        "Engine built",
        engine=name,
        env=config.env,
        transitions=len(engine.table),
        metrics_enabled=metrics is not None
    )
    return engine
