"""Core domain models for metric push events."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class MetricKind(Enum):
    """Kind of measurement carried by a metric.

    Closed set. Backends silently discard any other value at push time.
    """

    COUNT = "count"
    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    DISTRIBUTION = "distribution"


def freeze_tags(tags: Iterable[str] | None) -> tuple[str, ...]:
    """Return tags as a tuple. A lone string is one tag, not a sequence."""
    if tags is None:
        return ()
    if isinstance(tags, str):
        return (tags,)
    return tuple(tags)


@dataclass(frozen=True)
class Metric:
    """A single measurement event.

    Attributes:
        name: Metric name (e.g., scan.checks.finished).
        kind: Which backend aggregation the value feeds.
        value: The measured value. Counters expect whole numbers.
        tags: Opaque key:value strings, forwarded verbatim and in order.
    """

    name: str
    kind: MetricKind
    value: float
    tags: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", freeze_tags(self.tags))

    def with_rate(self, rate: float) -> "RatedMetric":
        """Return a RatedMetric with the same fields and the given rate."""
        return RatedMetric.from_metric(self, rate)


@dataclass(frozen=True)
class RatedMetric(Metric):
    """A metric annotated with the sampling rate the caller applied.

    Attributes:
        rate: Fraction of real occurrences this measurement stands for,
            expected in (0, 1]. 1 means unsampled. Forwarded verbatim.
    """

    rate: float = 1.0

    @classmethod
    def from_metric(cls, metric: Metric, rate: float = 1.0) -> "RatedMetric":
        """Build a RatedMetric from an unrated metric."""
        return cls(
            name=metric.name,
            kind=metric.kind,
            value=metric.value,
            tags=metric.tags,
            rate=rate,
        )

    @property
    def metric(self) -> Metric:
        """The unrated part of this measurement."""
        return Metric(
            name=self.name, kind=self.kind, value=self.value, tags=self.tags
        )
