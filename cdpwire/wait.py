"""Polling helpers that wait until a condition holds or a deadline passes."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type, TypeVar, Union

T = TypeVar("T")

ExceptionTypes = Union[Type[BaseException], Tuple[Type[BaseException], ...]]


class Timeout(Exception):
    """Raised when the awaited event never came."""

    def __init__(self) -> None:
        super().__init__("The event waited for never came")


@dataclass
class Wait:
    """Repeatedly polls a predicate, sleeping between attempts, until a timeout.

    Both ``timeout`` and ``sleep`` are given in seconds.
    """

    timeout: float = 10.0
    sleep: float = 0.1

    @classmethod
    def with_timeout(cls, timeout: float) -> "Wait":
        return cls(timeout=timeout)

    @classmethod
    def with_sleep(cls, sleep: float) -> "Wait":
        return cls(sleep=sleep)

    @classmethod
    def forever(cls) -> "Wait":
        return cls(timeout=math.inf)

    def until(self, predicate: Callable[[], Optional[T]]) -> T:
        """Return the first value from ``predicate`` that is not ``None``.

        Raises :class:`Timeout` once the timeout has passed.
        """
        start = time.monotonic()
        while True:
            value = predicate()
            if value is not None:
                return value
            if time.monotonic() - start > self.timeout:
                raise Timeout()
            time.sleep(self.sleep)

    def strict_until(self, predicate: Callable[[], T], ignore: ExceptionTypes) -> T:
        """Return what ``predicate`` returns once it stops raising.

        Exceptions of the ``ignore`` types mean "not yet" and are swallowed;
        any other exception ends the wait and propagates. Raises
        :class:`Timeout` once the timeout has passed.
        """
        start = time.monotonic()
        while True:
            try:
                return predicate()
            except ignore:
                pass
            if time.monotonic() - start > self.timeout:
                raise Timeout()
            time.sleep(self.sleep)