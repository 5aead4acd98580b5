"""DogStatsD backend client.

Adapts ``datadog.DogStatsd`` to the MetricsClient port. Encoding, client
side sampling and the UDP send are left to the datadog library; this
module only routes each metric kind to the matching DogStatsd call.
"""

import logging
import socket
from collections.abc import Callable

from datadog.dogstatsd import DogStatsd

from pushmetrics.config import DogStatsdConfig
from pushmetrics.core.errors import TransportError
from pushmetrics.core.models import Metric, MetricKind, RatedMetric
from pushmetrics.core.ports import StatsdTransport

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8125

_PushFunc = Callable[[str, float, list[str], float], None]


def _check_address(host: str, port: int) -> None:
    """Raise TransportError unless host:port is a usable UDP destination."""
    if not 0 < port <= 65535:
        raise TransportError(host, port, "port must be in 1..65535")
    try:
        socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise TransportError(host, port, str(exc)) from exc


class DogStatsdClient:
    """MetricsClient that pushes to a DogStatsD agent.

    A disabled client is still a valid client: every push returns without
    touching the transport. The flag is fixed at construction.

    Example:
        ```python
        from pushmetrics import DogStatsdClient, DogStatsdConfig, count

        client = DogStatsdClient.from_config(DogStatsdConfig(enabled=True))
        client.push(count("checks.finished", tags=["team:security"]))
        ```
    """

    def __init__(self, statsd: StatsdTransport, enabled: bool = True) -> None:
        """Initialize the client around a statsd transport.

        Args:
            statsd: Transport receiving the calls, usually a DogStatsd.
            enabled: False turns every push into a no-op.
        """
        self._statsd = statsd
        self._enabled = enabled
        self.dropped = 0
        self._routes: dict[MetricKind, _PushFunc] = {
            MetricKind.COUNT: self._count,
            MetricKind.GAUGE: self._gauge,
            MetricKind.HISTOGRAM: self._histogram,
            MetricKind.DISTRIBUTION: self._distribution,
        }

    @classmethod
    def from_config(cls, config: DogStatsdConfig) -> "DogStatsdClient":
        """Build a client from resolved configuration.

        Empty host and zero port fall back to localhost:8125. A disabled
        configuration still produces a (disabled) client.

        Raises:
            TransportError: If the address cannot be used as a UDP target, or
                DogStatsd cannot be built from its DD_* environment.
        """
        host = config.host or DEFAULT_HOST
        port = config.port or DEFAULT_PORT
        _check_address(host, port)
        logger.debug(
            "DogStatsD client for %s:%d (enabled=%s)", host, port, config.enabled
        )
        try:
            # DogStatsd also reads DD_* variables and fails on malformed ones
            statsd = DogStatsd(host=host, port=port)
        except (ValueError, OSError) as exc:
            raise TransportError(host, port, str(exc)) from exc
        return cls(statsd, enabled=config.enabled)

    @property
    def enabled(self) -> bool:
        """Whether pushes reach the transport."""
        return self._enabled

    @property
    def statsd(self) -> StatsdTransport:
        """The underlying transport."""
        return self._statsd

    def push(self, metric: Metric) -> None:
        """Push the metric with rate 1."""
        self.push_with_rate(RatedMetric.from_metric(metric, 1.0))

    def push_with_rate(self, rated_metric: RatedMetric) -> None:
        """Push the metric, forwarding its rate as the sample rate."""
        if not self._enabled:
            return

        kind = rated_metric.kind
        push_func = self._routes.get(kind) if isinstance(kind, MetricKind) else None
        if push_func is None:
            self._drop(rated_metric.name, kind, rated_metric.value, "unknown kind")
            return

        push_func(
            rated_metric.name,
            rated_metric.value,
            list(rated_metric.tags),
            rated_metric.rate,
        )

    def _drop(self, name: str, kind: object, value: float, reason: str) -> None:
        self.dropped += 1
        logger.debug(
            "Dropped metric %r (%s): kind=%r value=%r", name, reason, kind, value
        )

    def _count(self, name: str, value: float, tags: list[str], rate: float) -> None:
        try:
            # int() truncates toward zero
            whole = int(value)
        except (ValueError, OverflowError):
            self._drop(name, MetricKind.COUNT, value, "count is not finite")
            return
        self._statsd.increment(name, whole, tags=tags, sample_rate=rate)

    def _gauge(self, name: str, value: float, tags: list[str], rate: float) -> None:
        self._statsd.gauge(name, value, tags=tags, sample_rate=rate)

    def _histogram(
        self, name: str, value: float, tags: list[str], rate: float
    ) -> None:
        self._statsd.histogram(name, value, tags=tags, sample_rate=rate)

    def _distribution(
        self, name: str, value: float, tags: list[str], rate: float
    ) -> None:
        self._statsd.distribution(name, value, tags=tags, sample_rate=rate)
