import asyncio

import pytest

from adstudio.engine import Activity, Operation, OperationGate, RegenerationCoordinator, ResultSet
from adstudio.errors import GenerationError, InvalidRequestError
from adstudio.services.creative import CreativeService
from fakes import (
    BlockingImageProvider,
    FakeImageProvider,
    ScriptedImageProvider,
    direction_index,
    label_of,
    make_asset,
    make_request,
    run,
)


def _coordinator(provider):
    results = ResultSet(3)
    results.fill([make_asset("a0"), make_asset("a1"), make_asset("a2")])
    gate = OperationGate()
    return RegenerationCoordinator(CreativeService(provider), results, gate)


def _labels(results):
    return [label_of(ad) for ad in results]


def test_regenerate_replaces_only_the_target_slot():
    provider = FakeImageProvider()
    coordinator = _coordinator(provider)

    result = run(coordinator.regenerate(make_request(), 1))

    assert label_of(result) == "image-1"
    assert _labels(coordinator.results) == ["a0", "image-1", "a2"]
    assert direction_index(provider.calls[0][0]) == 1
    assert coordinator.state is None


@pytest.mark.parametrize("second_index", [0, 1, 2])
def test_regenerate_while_regenerating_is_a_no_op(second_index):
    async def scenario():
        provider = BlockingImageProvider()
        coordinator = _coordinator(provider)
        request = make_request()

        first = asyncio.ensure_future(coordinator.regenerate(request, 1))
        await provider.started.wait()
        assert coordinator.state == Activity(Operation.REGENERATE, 1)

        rejected = await coordinator.regenerate(request, second_index)
        assert rejected is None
        assert len(provider.calls) == 1
        assert _labels(coordinator.results) == ["a0", "a1", "a2"]

        provider.release.set()
        await first
        return coordinator, provider

    coordinator, provider = run(scenario())
    assert _labels(coordinator.results) == ["a0", "slow-1", "a2"]
    assert len(provider.calls) == 1
    assert coordinator.state is None


def test_rejected_while_another_operation_holds_the_gate():
    provider = FakeImageProvider()
    coordinator = _coordinator(provider)

    async def scenario():
        with coordinator.gate.hold(Operation.EDIT, 0):
            return await coordinator.regenerate(make_request(), 2)

    assert run(scenario()) is None
    assert provider.calls == []


def test_failure_keeps_the_slot_and_returns_to_idle():
    provider = ScriptedImageProvider([RuntimeError("timeout")] * 3)
    coordinator = _coordinator(provider)

    with pytest.raises(GenerationError):
        run(coordinator.regenerate(make_request(), 0))

    assert _labels(coordinator.results) == ["a0", "a1", "a2"]
    assert coordinator.state is None
    assert not coordinator.gate.busy


def test_out_of_range_index_raises_without_provider_call():
    provider = FakeImageProvider()
    coordinator = _coordinator(provider)

    with pytest.raises(InvalidRequestError):
        run(coordinator.regenerate(make_request(), 3))
    with pytest.raises(InvalidRequestError):
        run(coordinator.regenerate(make_request(), -1))

    assert provider.calls == []
    assert coordinator.state is None


def test_empty_results_reject_any_index():
    provider = FakeImageProvider()
    coordinator = RegenerationCoordinator(CreativeService(provider), ResultSet(3), OperationGate())
    with pytest.raises(InvalidRequestError):
        run(coordinator.regenerate(make_request(), 0))
    assert provider.calls == []


def test_gate_refuses_nested_hold():
    gate = OperationGate()
    with gate.hold(Operation.GENERATE):
        assert gate.busy
        assert gate.current == Activity(Operation.GENERATE)
        with pytest.raises(RuntimeError):
            with gate.hold(Operation.REGENERATE, 0):
                pass
    assert not gate.busy
    assert gate.state(Operation.GENERATE) is None
