import pytest

from cdpwire.protocol.method import Response
from cdpwire.transport.registry import ConnectionClosed, WaitingCallRegistry


def test_register_and_receive_calls():
    waiting_calls = WaitingCallRegistry()

    call_rx = waiting_calls.register_call(431)
    resp = Response(call_id=431, result=True)

    call_rx2 = waiting_calls.register_call(123)
    resp2 = Response(call_id=123, result=False)

    waiting_calls.resolve_call(resp)
    waiting_calls.resolve_call(resp2)

    # Received in reverse order to that in which they were resolved.
    assert call_rx2.get(timeout=1) == Response(call_id=123, result=False)
    assert call_rx.get(timeout=1) == Response(call_id=431, result=True)


def test_resolving_an_unknown_call_raises():
    registry = WaitingCallRegistry()
    with pytest.raises(KeyError):
        registry.resolve_call(Response(call_id=9, result={}))


def test_a_call_is_resolved_only_once():
    registry = WaitingCallRegistry()
    pending = registry.register_call(5)
    registry.resolve_call(Response(call_id=5, result={}))
    assert pending.get(timeout=1) == Response(call_id=5, result={})
    with pytest.raises(KeyError):
        registry.resolve_call(Response(call_id=5, result={}))


def test_unregister_removes_the_call():
    registry = WaitingCallRegistry()
    registry.register_call(1)
    registry.unregister_call(1)
    with pytest.raises(KeyError):
        registry.resolve_call(Response(call_id=1, result={}))


def test_unregistering_an_unknown_call_raises():
    registry = WaitingCallRegistry()
    with pytest.raises(KeyError):
        registry.unregister_call(77)


def test_cancel_tells_every_waiting_call():
    registry = WaitingCallRegistry()
    first = registry.register_call(1)
    second = registry.register_call(2)

    registry.cancel_outstanding_method_calls()

    outcomes = [first.get(timeout=1), second.get(timeout=1)]
    assert all(isinstance(outcome, ConnectionClosed) for outcome in outcomes)
    assert str(outcomes[0]) == (
        "Unable to make method calls because underlying connection is closed"
    )


def test_cancel_leaves_resolved_calls_alone():
    registry = WaitingCallRegistry()
    resolved = registry.register_call(1)
    waiting = registry.register_call(2)
    registry.resolve_call(Response(call_id=1, result={"done": True}))

    registry.cancel_outstanding_method_calls()

    assert resolved.get(timeout=1) == Response(call_id=1, result={"done": True})
    assert resolved.empty()
    assert isinstance(waiting.get(timeout=1), ConnectionClosed)