"""Exceptions raised by pushmetrics.

Push paths never raise. These errors only surface while building clients.
"""


class MetricsError(Exception):
    """Base class for pushmetrics errors."""


class TransportError(MetricsError):
    """The resolved address cannot be turned into a usable transport."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        super().__init__(f"cannot build statsd transport for {host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason


class UnsupportedBackendError(MetricsError, ValueError):
    """A backend kind was requested that pushmetrics does not provide."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"unsupported metrics backend: {kind!r}")
        self.kind = kind
