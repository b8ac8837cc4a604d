"""Prometheus metrics for trip planning."""

from prometheus_client import Counter

trips_created_total = Counter(
    "trips_created_total",
    "Total trips created",
)

activities_created_total = Counter(
    "activities_created_total",
    "Total activities scheduled",
)

client_errors_total = Counter(
    "client_errors_total",
    "Total requests rejected with a client error",
    ["code"],
)

mail_deliveries_total = Counter(
    "mail_deliveries_total",
    "Total outbound mail deliveries",
    ["kind", "outcome"],
)


class PrometheusPlannerMetrics:
    """Prometheus-based planner metrics implementation."""

    def inc_trip_created(self) -> None:
        """Increment trip creation counter."""
        trips_created_total.inc()

    def inc_activity_created(self) -> None:
        """Increment activity creation counter."""
        activities_created_total.inc()

    def inc_client_error(self, code: str) -> None:
        """Increment client error counter."""
        client_errors_total.labels(code=code).inc()

    def record_mail(self, kind: str, outcome: str) -> None:
        """Record a mail delivery attempt."""
        mail_deliveries_total.labels(kind=kind, outcome=outcome).inc()


metrics = PrometheusPlannerMetrics()
