"""Observability Module - Logging, Tracing, and Metrics

This module provides:
1. Structured logging with context
2. Component execution tracing (engine computations, store updates)
3. Aggregated metrics, including rejected symptom inputs
"""
import logging
import functools
from typing import Dict, Any, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime

from config.settings import LOG_LEVEL

# Configure structured logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("energy_budget")


@dataclass
class ComponentTrace:
    """Represents a single component execution trace."""
    component: str
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    duration_ms: Optional[float] = None
    input_summary: str = ""
    success: bool = True
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def complete(self, success: bool = True, error: str = None):
        """Mark trace as complete."""
        self.end_time = datetime.now()
        self.duration_ms = (self.end_time - self.start_time).total_seconds() * 1000
        self.success = success
        self.error = error


@dataclass
class PipelineMetrics:
    """Aggregated metrics for symptom updates and budget computations."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    rejected_inputs: int = 0
    total_latency_ms: float = 0
    component_latencies: Dict[str, list] = field(default_factory=dict)

    @property
    def success_rate(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.successful_requests / self.total_requests

    @property
    def avg_latency_ms(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.total_latency_ms / self.total_requests

    def record(self, trace: ComponentTrace, top_level: bool = True):
        """Record a trace into metrics.

        Request counts and total latency only include top-level traces, so one
        symptom report counts once even though the engine runs inside it.
        """
        if top_level:
            self.total_requests += 1
            if trace.success:
                self.successful_requests += 1
            else:
                self.failed_requests += 1
            if trace.duration_ms is not None:
                self.total_latency_ms += trace.duration_ms

        if trace.duration_ms is not None:
            self.component_latencies.setdefault(trace.component, []).append(trace.duration_ms)

    def record_rejection(self):
        self.rejected_inputs += 1

    def reset(self):
        self.total_requests = 0
        self.successful_requests = 0
        self.failed_requests = 0
        self.rejected_inputs = 0
        self.total_latency_ms = 0
        self.component_latencies = {}

    def summary(self) -> Dict[str, Any]:
        """Return metrics summary."""
        component_avg = {}
        for component, latencies in self.component_latencies.items():
            if latencies:
                component_avg[component] = sum(latencies) / len(latencies)

        return {
            "total_requests": self.total_requests,
            "success_rate": f"{self.success_rate:.1%}",
            "avg_latency_ms": f"{self.avg_latency_ms:.2f}ms",
            "rejected_inputs": self.rejected_inputs,
            "component_avg_latency": component_avg,
        }


# Global metrics instance
metrics = PipelineMetrics()


class Tracer:
    """Context manager for tracing component execution."""

    # Open tracers; nested ones only contribute component latency
    _depth = 0

    def __init__(self, component: str, input_data: Any = None):
        self.trace = ComponentTrace(component=component)
        if input_data is not None:
            self.trace.input_summary = str(input_data)[:200]

    def __enter__(self):
        Tracer._depth += 1
        logger.debug(f"▶ {self.trace.component} started")
        return self.trace

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.trace.complete(success=False, error=str(exc_val))
            logger.error(f"✖ {self.trace.component} failed: {exc_val}")
        else:
            self.trace.complete(success=True)
            logger.debug(f"✔ {self.trace.component} completed in {self.trace.duration_ms:.2f}ms")

        Tracer._depth -= 1
        metrics.record(self.trace, top_level=Tracer._depth == 0)
        return False  # Don't suppress exceptions


def trace_component(func: Callable) -> Callable:
    """Decorator to trace a component method under its class name."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        component = f"{self.__class__.__name__}.{func.__name__}"
        with Tracer(component, args[0] if args else None):
            return func(self, *args, **kwargs)
    return wrapper


def log_snapshot(symptoms: Dict[str, int], snapshot: Dict[str, Any], stage: str):
    """Log a published symptom/recommendation pair at a given stage."""
    logger.debug(f"[{stage}] Symptoms: {symptoms}")
    logger.debug(f"[{stage}] Energy budget: {snapshot.get('energyBudget')}%")


def get_metrics_summary() -> Dict[str, Any]:
    """Get current metrics summary for dashboard views."""
    return metrics.summary()
