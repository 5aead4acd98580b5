"""Port interfaces for metric backends.

These protocols define the contracts that backend clients and statsd
transports must implement. The pool depends only on these interfaces,
not on concrete implementations.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from pushmetrics.core.models import Metric, RatedMetric


@runtime_checkable
class MetricsClient(Protocol):
    """Port for pushing metrics to a monitoring backend.

    Implementations must never raise from either method: a metrics outage
    must not fail the instrumented code.
    Examples: DogStatsdClient, InMemoryClient, ClientPool.
    """

    def push(self, metric: Metric) -> None:
        """Push a metric at full weight (rate 1)."""
        ...

    def push_with_rate(self, rated_metric: RatedMetric) -> None:
        """Push a metric that the caller sampled at rated_metric.rate."""
        ...


@runtime_checkable
class StatsdTransport(Protocol):
    """Port for the DogStatsD wire client.

    Matches the subset of ``datadog.DogStatsd`` that backend clients call.
    Protocol encoding, sampling and sending are the transport's concern.
    """

    def increment(
        self,
        metric: str,
        value: int = 1,
        tags: Sequence[str] | None = None,
        sample_rate: float | None = None,
    ) -> None:
        """Increment a counter."""
        ...

    def gauge(
        self,
        metric: str,
        value: float,
        tags: Sequence[str] | None = None,
        sample_rate: float | None = None,
    ) -> None:
        """Record an instantaneous value."""
        ...

    def histogram(
        self,
        metric: str,
        value: float,
        tags: Sequence[str] | None = None,
        sample_rate: float | None = None,
    ) -> None:
        """Sample a value into a per-process histogram."""
        ...

    def distribution(
        self,
        metric: str,
        value: float,
        tags: Sequence[str] | None = None,
        sample_rate: float | None = None,
    ) -> None:
        """Sample a value into a globally aggregated distribution."""
        ...
