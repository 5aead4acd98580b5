"""Configuration for pushmetrics backends.

Settings are plain frozen dataclasses. ``from_env`` resolves them once from
an environment mapping; nothing reads ``os.environ`` after that. Parsing is
permissive: a malformed value falls back to its default and never raises.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

DOGSTATSD_ENABLED = "DOGSTATSD_ENABLED"
DOGSTATSD_HOST = "DOGSTATSD_HOST"
DOGSTATSD_PORT = "DOGSTATSD_PORT"

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_bool(raw: str | None, default: bool = False) -> bool:
    """Parse a boolean environment value.

    Args:
        raw: Raw value, or None when the variable is unset.
        default: Returned for unset or unrecognized values.

    Returns:
        The parsed flag.
    """
    if raw is None:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    return default


def parse_port(raw: str | None, default: int = 0) -> int:
    """Parse a base-10 port number, returning default when it is not one.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace and digit separators such as "8_125" are rejected.
    """
    if raw is None or _PORT_PATTERN.fullmatch(raw) is None:
        return default
    return int(raw, 10)


@dataclass(frozen=True)
class DogStatsdConfig:
    """Settings for the DogStatsD backend.

    Attributes:
        enabled: Whether pushes reach the agent. Disabled clients no-op.
        host: Agent host. Empty means localhost.
        port: Agent UDP port. Zero means 8125.
    """

    enabled: bool = False
    host: str = ""
    port: int = 0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DogStatsdConfig":
        """Read DOGSTATSD_ENABLED, DOGSTATSD_HOST and DOGSTATSD_PORT."""
        env = os.environ if environ is None else environ
        return cls(
            enabled=parse_bool(env.get(DOGSTATSD_ENABLED)),
            host=env.get(DOGSTATSD_HOST, ""),
            port=parse_port(env.get(DOGSTATSD_PORT)),
        )


@dataclass(frozen=True)
class MetricsConfig:
    """Settings for every supported backend."""

    dogstatsd: DogStatsdConfig = field(default_factory=DogStatsdConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "MetricsConfig":
        """Resolve the configuration of every backend from the environment.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A MetricsConfig snapshot. Later environment changes do not
            affect it.
        """
        env = os.environ if environ is None else environ
        return cls(dogstatsd=DogStatsdConfig.from_env(env))
