"""Push metrics for a simulated scan run.

Run a DogStatsD agent (or `nc -ul 8125`) and:

    DOGSTATSD_ENABLED=true python examples/scan_metrics.py
"""

import logging
import random
import time

from pushmetrics import count, distribution, gauge, histogram, new_client

logging.basicConfig(level=logging.DEBUG)


def main() -> None:
    client = new_client()
    tags = ["team:security", "env:dev"]

    queue = 20
    for check in ("tls", "headers", "ports"):
        start = time.perf_counter()
        time.sleep(random.uniform(0.01, 0.05))
        elapsed = time.perf_counter() - start

        queue -= 1
        client.push(count("scan.checks.finished", tags=[*tags, f"check:{check}"]))
        client.push(histogram("scan.check.duration", elapsed, tags=tags))
        client.push(distribution("scan.check.duration.global", elapsed, tags=tags))
        client.push(gauge("scan.queue.depth", queue, tags=tags))

    # one in ten cache lookups is reported
    client.push_with_rate(count("scan.cache.hits", tags=tags).with_rate(0.1))


if __name__ == "__main__":
    main()
