"""Backend clients implementing the MetricsClient port.

Every supported backend is a BackendKind member paired with a constructor
that builds it from a MetricsConfig. Adding a backend means adding a member
and an entry in ``_CONSTRUCTORS``.
"""

from collections.abc import Callable
from enum import Enum
from types import MappingProxyType

from pushmetrics.adapters.backends.dogstatsd import DogStatsdClient
from pushmetrics.adapters.backends.in_memory import InMemoryClient
from pushmetrics.config import MetricsConfig
from pushmetrics.core.errors import UnsupportedBackendError
from pushmetrics.core.ports import MetricsClient


class BackendKind(Enum):
    """Backends pushmetrics can fan out to."""

    DATADOG = "DataDog"


BackendConstructor = Callable[[MetricsConfig], MetricsClient]


def _new_datadog(config: MetricsConfig) -> MetricsClient:
    return DogStatsdClient.from_config(config.dogstatsd)


_CONSTRUCTORS: MappingProxyType[BackendKind, BackendConstructor] = MappingProxyType(
    {
        BackendKind.DATADOG: _new_datadog,
    }
)


def backend_constructor(kind: BackendKind | str) -> BackendConstructor:
    """Return the constructor registered for a backend kind.

    Args:
        kind: A BackendKind or its string value (e.g., "DataDog").

    Raises:
        UnsupportedBackendError: If no such backend exists.
    """
    try:
        resolved = kind if isinstance(kind, BackendKind) else BackendKind(kind)
        return _CONSTRUCTORS[resolved]
    except (ValueError, KeyError) as exc:
        raise UnsupportedBackendError(kind) from exc


def new_backend_client(
    kind: BackendKind | str, config: MetricsConfig | None = None
) -> MetricsClient:
    """Build a single named backend client.

    Args:
        kind: Which backend to build.
        config: Resolved settings. Defaults to MetricsConfig.from_env().

    Returns:
        The backend client. Disabled backends are returned too.

    Raises:
        UnsupportedBackendError: If kind names no known backend.
        TransportError: If the backend's address is unusable.
    """
    constructor = backend_constructor(kind)
    return constructor(config if config is not None else MetricsConfig.from_env())


__all__ = [
    "BackendConstructor",
    "BackendKind",
    "DogStatsdClient",
    "InMemoryClient",
    "backend_constructor",
    "new_backend_client",
]
