"""Two threads taking strict turns."""

from __future__ import annotations

import threading
from typing import Callable


class FooBar:
    """Lets ``foo`` and ``bar`` run in alternation, ``foo`` first, ``n`` times each."""

    def __init__(self, n: int) -> None:
        self.n = n
        self._foo_turn = True
        self._cond = threading.Condition()

    def foo(self, print_foo: Callable[[], None]) -> None:
        """Call ``print_foo`` ``n`` times, each time waiting for ``bar`` to go before."""
        for _ in range(self.n):
            with self._cond:
                self._cond.wait_for(lambda: self._foo_turn)
                print_foo()
                self._foo_turn = False
                self._cond.notify()

    def bar(self, print_bar: Callable[[], None]) -> None:
        """Call ``print_bar`` ``n`` times, each time after ``foo`` has gone."""
        for _ in range(self.n):
            with self._cond:
                self._cond.wait_for(lambda: not self._foo_turn)
                print_bar()
                self._foo_turn = True
                self._cond.notify()