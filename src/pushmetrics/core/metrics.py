"""Metric helper functions for creating Metric objects."""

from collections.abc import Iterable

from pushmetrics.core.models import Metric, MetricKind, freeze_tags


def count(
    name: str,
    value: float = 1.0,
    tags: Iterable[str] | None = None,
) -> Metric:
    """Create a counter metric.

    Args:
        name: Metric name (e.g., "checks.finished")
        value: Increment value (default: 1.0). Truncated to an integer
            by backends, so pass whole numbers.
        tags: Optional key:value tags

    Returns:
        Metric of kind COUNT
    """
    return Metric(
        name=name, kind=MetricKind.COUNT, value=value, tags=freeze_tags(tags)
    )


def gauge(
    name: str,
    value: float,
    tags: Iterable[str] | None = None,
) -> Metric:
    """Create a gauge metric.

    Args:
        name: Metric name (e.g., "queue.depth")
        value: Current gauge value
        tags: Optional key:value tags

    Returns:
        Metric of kind GAUGE
    """
    return Metric(
        name=name, kind=MetricKind.GAUGE, value=value, tags=freeze_tags(tags)
    )


def histogram(
    name: str,
    value: float,
    tags: Iterable[str] | None = None,
) -> Metric:
    """Create a histogram metric for a single observation."""
    return Metric(
        name=name, kind=MetricKind.HISTOGRAM, value=value, tags=freeze_tags(tags)
    )


def distribution(
    name: str,
    value: float,
    tags: Iterable[str] | None = None,
) -> Metric:
    """Create a distribution metric for a single observation.

    Distributions are aggregated by the backend across every reporting
    process, unlike histograms.
    """
    return Metric(
        name=name, kind=MetricKind.DISTRIBUTION, value=value, tags=freeze_tags(tags)
    )
