"""
Metrics Collection
Prometheus metrics for form sessions
"""

from prometheus_client import CollectorRegistry, Counter, Gauge, REGISTRY, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the session tracker.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        self.registry = registry

        self.forms_sent_total = Counter(
            "formwire_forms_sent_total",
            "Total number of forms handed to the transport",
            ["form_type"],
            registry=registry,
        )
        self.responses_total = Counter(
            "formwire_responses_total",
            "Total number of replies classified, by result",
            ["form_type", "result"],
            registry=registry,
        )
        self.forms_closed_total = Counter(
            "formwire_forms_closed_total",
            "Total number of forms closed by the server before a reply",
            registry=registry,
        )
        self.forms_awaiting = Gauge(
            "formwire_forms_awaiting",
            "Number of forms awaiting a reply",
            registry=registry,
        )

    def record_sent(self, form_type: str, awaiting: int) -> None:
        self.forms_sent_total.labels(form_type=form_type).inc()
        self.forms_awaiting.set(awaiting)

    def record_response(self, form_type: str, result: str, awaiting: int) -> None:
        self.responses_total.labels(form_type=form_type, result=result).inc()
        self.forms_awaiting.set(awaiting)

    def record_closed(self, awaiting: int) -> None:
        self.forms_closed_total.inc()
        self.forms_awaiting.set(awaiting)

    def export(self) -> bytes:
        """Export metrics in Prometheus text format."""
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector()
