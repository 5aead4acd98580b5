"""BDD step definitions for client pool features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from pushmetrics import (
    BackendKind,
    ClientPool,
    DogStatsdClient,
    Metric,
    MetricKind,
    TransportError,
    new_client,
)
from pushmetrics.adapters.backends import dogstatsd as dogstatsd_module
from tests.statsd_fakes import RecordingStatsd


@dataclass
class PoolScenarioContext:
    """Shared state between steps in a pool scenario."""

    pool: ClientPool = field(default_factory=ClientPool)
    transports: list[RecordingStatsd] = field(default_factory=list)


@pytest.fixture
def ctx(monkeypatch: pytest.MonkeyPatch) -> PoolScenarioContext:
    """Fresh scenario context with DogStatsD replaced by a recorder."""
    context = PoolScenarioContext()

    def _recording_dogstatsd(host: str, port: int) -> RecordingStatsd:
        statsd = RecordingStatsd()
        context.transports.append(statsd)
        return statsd

    monkeypatch.setattr(dogstatsd_module, "DogStatsd", _recording_dogstatsd)
    return context


def _push(
    ctx: PoolScenarioContext,
    kind: str,
    name: str,
    value: float,
    tag: str,
    rate: float | None = None,
) -> None:
    metric = Metric(name, MetricKind[kind.upper()], value, (tag,))
    if rate is None:
        ctx.pool.push(metric)
    else:
        ctx.pool.push_with_rate(metric.with_rate(rate))


# === Given ===
@given(parsers.parse("a pool of {n:d} recording DogStatsD clients"))
def step_recording_pool(ctx: PoolScenarioContext, n: int) -> None:
    ctx.transports = [RecordingStatsd() for _ in range(n)]
    ctx.pool = ClientPool(DogStatsdClient(t) for t in ctx.transports)


@given(parsers.parse('the environment variable "{name}" is "{value}"'))
def step_env(
    ctx: PoolScenarioContext, monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)


@given("a pool built from the environment")
def step_env_pool(ctx: PoolScenarioContext) -> None:
    ctx.pool = new_client()


# === When ===
@when(parsers.parse('the environment variable "{name}" is set to "{value}"'))
def step_env_change(
    ctx: PoolScenarioContext, monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)


@when(parsers.parse('I push a {kind} "{name}" of {value:g} tagged "{tag}"'))
def step_push(
    ctx: PoolScenarioContext, kind: str, name: str, value: float, tag: str
) -> None:
    _push(ctx, kind, name, value, tag)


@when(
    parsers.parse(
        'I push a {kind} "{name}" of {value:g} tagged "{tag}" at rate {rate:g}'
    )
)
def step_push_with_rate(
    ctx: PoolScenarioContext, kind: str, name: str, value: float, tag: str, rate: float
) -> None:
    _push(ctx, kind, name, value, tag, rate)


# === Then ===
@then(parsers.parse("every member received {n:d} transport calls"))
def step_total_calls(ctx: PoolScenarioContext, n: int) -> None:
    assert ctx.transports
    for statsd in ctx.transports:
        assert len(statsd.calls) == n


@then(parsers.parse('every member received {n:d} "{method}" calls'))
def step_method_calls(ctx: PoolScenarioContext, n: int, method: str) -> None:
    assert ctx.transports
    for statsd in ctx.transports:
        assert len(statsd.calls_to(method)) == n


@then(
    parsers.parse(
        'every member\'s "{method}" call has value {value:g} and rate {rate:g}'
    )
)
def step_call_values(
    ctx: PoolScenarioContext, method: str, value: float, rate: float
) -> None:
    for statsd in ctx.transports:
        (call,) = statsd.calls_to(method)
        assert call.value == value
        assert call.sample_rate == rate


@then(parsers.parse("the pool has {n:d} members"))
def step_pool_size(ctx: PoolScenarioContext, n: int) -> None:
    assert len(ctx.pool) == n


@then("no transport calls were made")
def step_no_calls(ctx: PoolScenarioContext) -> None:
    assert all(statsd.calls == [] for statsd in ctx.transports)


@then(parsers.parse('the pool recorded a construction error for "{kind}"'))
def step_construction_error(ctx: PoolScenarioContext, kind: str) -> None:
    assert isinstance(ctx.pool.construction_errors[BackendKind(kind)], TransportError)


@then(parsers.parse("every member is {state}"))
def step_member_state(ctx: PoolScenarioContext, state: str) -> None:
    assert ctx.pool.clients
    for client in ctx.pool.clients:
        assert isinstance(client, DogStatsdClient)
        assert client.enabled is (state == "enabled")
