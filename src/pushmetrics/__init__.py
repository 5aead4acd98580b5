"""pushmetrics - push counters, gauges, histograms and distributions to statsd.

Example:
    ```python
    from pushmetrics import count, new_client

    client = new_client()  # reads DOGSTATSD_* from the environment
    client.push(count("checks.finished", tags=["team:security"]))
    client.push_with_rate(count("cache.hits").with_rate(0.1))
    ```
"""

import logging

from pushmetrics.adapters.backends import (
    BackendKind,
    DogStatsdClient,
    InMemoryClient,
    new_backend_client,
)
from pushmetrics.config import DogStatsdConfig, MetricsConfig
from pushmetrics.core.errors import (
    MetricsError,
    TransportError,
    UnsupportedBackendError,
)
from pushmetrics.core.metrics import count, distribution, gauge, histogram
from pushmetrics.core.models import Metric, MetricKind, RatedMetric
from pushmetrics.core.ports import MetricsClient, StatsdTransport
from pushmetrics.pool import ClientPool

logging.getLogger(__name__).addHandler(logging.NullHandler())


def new_client(config: MetricsConfig | None = None) -> ClientPool:
    """Create a pool pushing to every configured backend.

    Args:
        config: Resolved settings. When omitted the DOGSTATSD_* variables
            are read from os.environ, once, here.

    Returns:
        A ClientPool. Construction never fails: unusable backends are left
        out and disabled ones no-op.
    """
    return ClientPool.from_config(
        config if config is not None else MetricsConfig.from_env()
    )


__all__ = [
    "BackendKind",
    "ClientPool",
    "DogStatsdClient",
    "DogStatsdConfig",
    "InMemoryClient",
    "Metric",
    "MetricKind",
    "MetricsClient",
    "MetricsConfig",
    "MetricsError",
    "RatedMetric",
    "StatsdTransport",
    "TransportError",
    "UnsupportedBackendError",
    "count",
    "distribution",
    "gauge",
    "histogram",
    "new_backend_client",
    "new_client",
]
