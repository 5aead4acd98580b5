"""Client pool: fans every push out to all configured backends."""

import logging
from collections.abc import Iterable, Iterator

from pushmetrics.adapters.backends import BackendKind, backend_constructor
from pushmetrics.config import MetricsConfig
from pushmetrics.core.errors import TransportError
from pushmetrics.core.models import Metric, RatedMetric
from pushmetrics.core.ports import MetricsClient

logger = logging.getLogger(__name__)


class ClientPool:
    """MetricsClient that broadcasts each push to every member client.

    Members are fixed at construction. Calls are made synchronously, in
    member order, on the calling thread. One member raising does not stop
    the others from receiving the call, and pool pushes never raise.

    Example:
        ```python
        from pushmetrics import ClientPool, MetricsConfig, histogram

        pool = ClientPool.from_config(MetricsConfig.from_env())
        pool.push(histogram("scan.duration", 4.2, tags=["check:tls"]))
        ```
    """

    def __init__(
        self,
        clients: Iterable[MetricsClient] = (),
        construction_errors: dict[BackendKind, Exception] | None = None,
    ) -> None:
        """Initialize the pool.

        Args:
            clients: Member clients. An empty pool is valid.
            construction_errors: Backends that failed to build, kept for
                diagnostics only.
        """
        self._clients: tuple[MetricsClient, ...] = tuple(clients)
        self._construction_errors = dict(construction_errors or {})

    @classmethod
    def from_config(cls, config: MetricsConfig) -> "ClientPool":
        """Build a pool with every backend whose construction succeeds.

        Backends with an unusable transport are left out and logged;
        disabled backends are kept as inert members.
        """
        clients: list[MetricsClient] = []
        errors: dict[BackendKind, Exception] = {}
        for kind in BackendKind:
            try:
                clients.append(backend_constructor(kind)(config))
            except TransportError as exc:
                logger.warning(
                    "Metrics backend %s left out of pool: %s", kind.value, exc
                )
                errors[kind] = exc
        return cls(clients, construction_errors=errors)

    @property
    def clients(self) -> tuple[MetricsClient, ...]:
        """Member clients, in dispatch order."""
        return self._clients

    @property
    def construction_errors(self) -> dict[BackendKind, Exception]:
        """Backends that could not be built, with the error each raised."""
        return dict(self._construction_errors)

    def __len__(self) -> int:
        return len(self._clients)

    def __iter__(self) -> Iterator[MetricsClient]:
        return iter(self._clients)

    def push(self, metric: Metric) -> None:
        """Push the metric to every member."""
        for client in self._clients:
            try:
                client.push(metric)
            except Exception:
                logger.exception(
                    "Metrics client %r failed to push %r", client, metric.name
                )

    def push_with_rate(self, rated_metric: RatedMetric) -> None:
        """Push the rated metric to every member."""
        for client in self._clients:
            try:
                client.push_with_rate(rated_metric)
            except Exception:
                logger.exception(
                    "Metrics client %r failed to push %r", client, rated_metric.name
                )
