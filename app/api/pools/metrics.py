"""Prometheus metrics for pool lookups."""

from prometheus_client import Counter

from .models import PoolLookupResult

# Lookups counter - tracks outcomes per lookup strategy
pool_lookups_total = Counter(
    "pool_lookups_total",
    "Total number of pool lookups by strategy and outcome",
    labelnames=[
        "strategy",
        "status",
    ],
)


def record_pool_lookup(result: PoolLookupResult) -> None:
    pool_lookups_total.labels(
        strategy=result.strategy.value,
        status=result.status.value,
    ).inc()
