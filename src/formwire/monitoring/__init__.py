"""Monitoring - Prometheus metrics for form sessions."""

from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
]
