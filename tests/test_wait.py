import math

import pytest

from cdpwire.wait import Timeout, Wait


def _fast():
    return Wait(timeout=0.05, sleep=0.005)


def test_defaults():
    wait = Wait()
    assert wait.timeout == 10
    assert wait.sleep == 0.1


def test_with_timeout_keeps_default_sleep():
    wait = Wait.with_timeout(3)
    assert wait.timeout == 3
    assert wait.sleep == Wait().sleep


def test_with_sleep_keeps_default_timeout():
    wait = Wait.with_sleep(0.5)
    assert wait.sleep == 0.5
    assert wait.timeout == Wait().timeout


def test_forever_never_times_out():
    wait = Wait.forever()
    assert wait.timeout == math.inf
    assert wait.sleep == Wait().sleep


def test_until_returns_first_value():
    attempts = iter([None, None, "done"])
    assert _fast().until(lambda: next(attempts)) == "done"


def test_until_accepts_falsy_values():
    assert _fast().until(lambda: 0) == 0


def test_until_times_out():
    calls = []

    def never():
        calls.append(1)
        return None

    with pytest.raises(Timeout):
        _fast().until(never)
    assert len(calls) >= 1


def test_timeout_message():
    assert str(Timeout()) == "The event waited for never came"


def test_strict_until_ignores_expected_errors():
    attempts = iter([KeyError("a"), KeyError("b"), 7])

    def predicate():
        item = next(attempts)
        if isinstance(item, Exception):
            raise item
        return item

    assert _fast().strict_until(predicate, KeyError) == 7


def test_strict_until_accepts_tuple_of_types():
    attempts = iter([KeyError("a"), LookupError("b"), "ok"])

    def predicate():
        item = next(attempts)
        if isinstance(item, Exception):
            raise item
        return item

    assert _fast().strict_until(predicate, (KeyError, LookupError)) == "ok"


def test_strict_until_propagates_unexpected_errors():
    def predicate():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        _fast().strict_until(predicate, KeyError)


def test_strict_until_times_out():
    def predicate():
        raise KeyError("missing")

    with pytest.raises(Timeout):
        _fast().strict_until(predicate, KeyError)