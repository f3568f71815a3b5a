"""Per-thread random engines and jittered sampling from distributions."""

from __future__ import annotations

import random
import threading
from typing import Any, Callable

_local = threading.local()


def thread_engine() -> random.Random:
    """Return this thread's random engine.

    It is seeded from the operating system's entropy source the first time
    a thread asks for it.
    """
    engine = getattr(_local, "engine", None)
    if engine is None:
        engine = random.Random(random.SystemRandom().getrandbits(64))
        _local.engine = engine
    return engine


class Jitter:
    """Draws samples from a distribution using the calling thread's engine.

    ``distribution`` is called with the engine followed by ``params``, so
    unbound methods of ``random.Random`` work directly, for example
    ``Jitter(random.Random.uniform, -1, 1)``.
    """

    __slots__ = ("_distribution", "_params")

    def __init__(
        self, distribution: Callable[..., Any] = random.Random.random, *params: Any
    ) -> None:
        if not callable(distribution):
            raise TypeError("a jitter needs a callable distribution")
        self._distribution = distribution
        self._params = params

    @property
    def params(self) -> tuple[Any, ...]:
        """The parameters passed to the distribution."""
        return self._params

    def sample(self) -> Any:
        """Draw one sample."""
        return self._distribution(thread_engine(), *self._params)

    def __call__(self) -> Any:
        return self.sample()

    def __repr__(self) -> str:
        name = getattr(self._distribution, "__name__", repr(self._distribution))
        return f"Jitter({name}, {', '.join(map(repr, self._params))})"