"""In-memory backend client."""

from pushmetrics.core.models import Metric, RatedMetric


class InMemoryClient:
    """In-memory implementation of MetricsClient.

    Records every accepted push as a RatedMetric in a list. Suitable for
    testing and local runs where no agent is available.
    """

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled
        self.pushes: list[RatedMetric] = []
        self.push_calls = 0
        self.push_with_rate_calls = 0

    @property
    def enabled(self) -> bool:
        """Whether pushes are recorded."""
        return self._enabled

    def push(self, metric: Metric) -> None:
        """Record the metric with rate 1."""
        self.push_calls += 1
        if self._enabled:
            self.pushes.append(RatedMetric.from_metric(metric, 1.0))

    def push_with_rate(self, rated_metric: RatedMetric) -> None:
        """Record the rated metric as given."""
        self.push_with_rate_calls += 1
        if self._enabled:
            self.pushes.append(rated_metric)

    def clear(self) -> None:
        """Forget every recorded push."""
        self.pushes.clear()
        self.push_calls = 0
        self.push_with_rate_calls = 0
